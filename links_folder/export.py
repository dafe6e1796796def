"""Exporting links.json to a user-chosen folder."""

import json
import logging
import os
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from . import config
from .config import EXPORT_STATE_FILENAME
from .exceptions import InvalidInputError, NothingToExportError
from .storage import LinkStorage, get_storage

logger = logging.getLogger(__name__)

EXPORT_PREFIX = "LinksFolder_JsonFile_"


def export_filename(now: Optional[datetime] = None) -> str:
    """Build the export file name, e.g. LinksFolder_JsonFile_2024-05-01T09.30.00.json."""
    now = now or datetime.now()
    return f"{EXPORT_PREFIX}{now.strftime('%Y-%m-%dT%H.%M.%S')}.json"


def _state_path(support_dir: Union[str, Path, None] = None) -> Path:
    return Path(support_dir or config.SUPPORT_DIR).expanduser() / EXPORT_STATE_FILENAME


def get_last_export_folder(support_dir: Union[str, Path, None] = None) -> str:
    """
    Get the folder used for the previous export.
    
    Returns:
        The remembered folder if it still exists, otherwise ~/Downloads
    """
    fallback = os.path.join(os.path.expanduser("~"), "Downloads")
    state_file = _state_path(support_dir)
    if not state_file.exists():
        return fallback
    try:
        with state_file.open("r", encoding="utf-8") as f:
            stored = json.load(f).get("lastExportFolder")
    except (OSError, json.JSONDecodeError, AttributeError) as e:
        logger.warning(f"Ignoring unreadable export state '{state_file}': {e}")
        return fallback
    if stored and os.path.isdir(stored):
        return stored
    return fallback


def _remember_export_folder(folder: str, support_dir: Union[str, Path, None] = None) -> None:
    state_file = _state_path(support_dir)
    os.makedirs(state_file.parent, exist_ok=True)
    with state_file.open("w", encoding="utf-8") as f:
        json.dump({"lastExportFolder": folder}, f, indent=2)


def export_links(destination: str, storage: Optional[LinkStorage] = None,
                 now: Optional[datetime] = None) -> Path:
    """
    Copy the saved links file verbatim into destination under a timestamped name.
    
    Args:
        destination: Directory to export into
        storage: Storage whose save location is exported (defaults to configured storage)
        now: Timestamp for the file name (defaults to the current time)
        
    Returns:
        Path of the exported file
        
    Raises:
        InvalidInputError: If destination is blank or not a directory
        NothingToExportError: If no links have been saved yet
    """
    destination = (destination or "").strip()
    if not destination:
        raise InvalidInputError("Please select a folder")
    destination = os.path.expanduser(destination)
    if not os.path.isdir(destination):
        raise InvalidInputError(f"Not a folder: {destination}")
    
    storage = storage or get_storage()
    source = storage.source_path()
    if not source.exists():
        raise NothingToExportError("No links found. You haven't saved any links yet.")
    
    export_path = Path(destination) / export_filename(now)
    shutil.copyfile(source, export_path)
    logger.info(f"Exported {source} to {export_path}")
    
    _remember_export_folder(destination, storage.support_dir)
    return export_path

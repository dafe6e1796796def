"""Listing installed applications from the filesystem."""

import logging
import os
import plistlib
from typing import Dict, List, Optional

from ..models import SavedApp

logger = logging.getLogger(__name__)

CANDIDATE_DIRS = [
    "/Applications",
    "/Applications/Utilities",
    "/System/Applications",
    "/System/Applications/Utilities",
    "/System/Library/CoreServices",  # Finder.app and other system apps
    os.path.expanduser("~/Applications"),
]


def _read_bundle_id(app_path: str) -> Optional[str]:
    plist_path = os.path.join(app_path, "Contents", "Info.plist")
    if not os.path.exists(plist_path):
        return None
    try:
        with open(plist_path, "rb") as f:
            info = plistlib.load(f)
    except (OSError, plistlib.InvalidFileException, ValueError) as e:
        logger.debug(f"Could not read {plist_path}: {e}")
        return None
    bundle_id = info.get("CFBundleIdentifier")
    return bundle_id if isinstance(bundle_id, str) else None


def list_installed_applications(candidate_dirs: List[str] = None) -> List[SavedApp]:
    """
    Get the installed applications from common macOS locations.
    
    Args:
        candidate_dirs: Directories to scan (defaults to CANDIDATE_DIRS)
        
    Returns:
        SavedApp entries sorted by name (first location wins on duplicates)
    """
    apps: Dict[str, SavedApp] = {}
    
    for base in candidate_dirs or CANDIDATE_DIRS:
        if not os.path.isdir(base):
            continue
        try:
            entries = os.listdir(base)
        except OSError as e:
            logger.warning(f"Cannot list applications in {base}: {e}")
            continue
        for entry in entries:
            if not entry.endswith(".app"):
                continue
            # Remove .app extension
            name = entry[:-4]
            if name in apps:
                continue
            path = os.path.join(base, entry)
            apps[name] = SavedApp(name=name, path=path, bundle_id=_read_bundle_id(path))
    
    return sorted(apps.values(), key=lambda app: app.name.lower())


def find_application(name: str, apps: List[SavedApp] = None) -> Optional[SavedApp]:
    """
    Find an installed application by name, bundle id or path (case-insensitive).
    
    Args:
        name: Name, bundle id or path given by the user
        apps: Optional application list (if None, scans the filesystem)
        
    Returns:
        The matching SavedApp, or None if nothing matches exactly
    """
    if apps is None:
        apps = list_installed_applications()
    
    wanted = name.strip().lower()
    for app in apps:
        candidates = [app.name, app.path, app.bundle_id or ""]
        if wanted in (c.lower() for c in candidates if c):
            return app
    return None

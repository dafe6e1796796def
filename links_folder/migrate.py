"""Upgrade of the legacy folders/links document into the items schema."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Union

from .ids import generate_id
from .models import Folder, Item, Link, SavedApp, Tree, item_from_dict

logger = logging.getLogger(__name__)

LEGACY_UNNAMED_FOLDER = "Unnamed Folder"

KIND_CURRENT = "current"
KIND_LEGACY = "legacy"
KIND_EMPTY = "empty"


@dataclass
class ParsedDocument:
    """Result of sniffing a raw document: which schema matched, and the tree."""
    kind: str
    tree: Tree


def _convert_legacy_link(data: Dict[str, Any]) -> Union[Link, None]:
    url = data.get("url")
    if not isinstance(url, str) or not url:
        logger.warning(f"Skipping legacy link without url: {data!r}")
        return None
    return Link(
        id=data.get("id") or generate_id(),
        title=data.get("title") or url,
        url=url,
        icon=data.get("icon") or None,
        app=SavedApp.from_dict(data.get("app")),
    )


def _convert_legacy_folder(data: Dict[str, Any]) -> Folder:
    items: List[Item] = []
    
    # Sub-folders first, then links
    for sub in data.get("folders") or []:
        if isinstance(sub, dict):
            items.append(_convert_legacy_folder(sub))
    
    for raw_link in data.get("links") or []:
        if isinstance(raw_link, dict):
            link = _convert_legacy_link(raw_link)
            if link is not None:
                items.append(link)
    
    return Folder(
        id=data.get("id") or generate_id(),
        title=data.get("title") or data.get("name") or LEGACY_UNNAMED_FOLDER,
        icon=data.get("icon") or None,
        items=items,
    )


def parse_document(raw: Any) -> ParsedDocument:
    """
    Classify a decoded JSON document and parse it into a tree.
    
    Args:
        raw: Decoded JSON (any shape)
        
    Returns:
        ParsedDocument with kind "current" when an items list is present,
        "legacy" when a folders list is present, otherwise "empty"
    """
    if isinstance(raw, dict):
        items = raw.get("items")
        if isinstance(items, list):
            parsed = [item for item in (item_from_dict(i) for i in items) if item is not None]
            return ParsedDocument(KIND_CURRENT, Tree(items=parsed))
        
        folders = raw.get("folders")
        if isinstance(folders, list):
            logger.info(f"Migrating legacy document with {len(folders)} folder(s)")
            converted = [_convert_legacy_folder(f) for f in folders if isinstance(f, dict)]
            return ParsedDocument(KIND_LEGACY, Tree(items=converted))
    
    logger.debug("Unrecognized document shape, treating as empty")
    return ParsedDocument(KIND_EMPTY, Tree())


def migrate(raw: Union[Tree, Any]) -> Tree:
    """Return the current-schema tree for any raw document (or an existing tree)."""
    if isinstance(raw, Tree):
        return raw
    return parse_document(raw).tree

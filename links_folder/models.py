"""Data models for the links tree."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .ids import generate_id

logger = logging.getLogger(__name__)

UNNAMED_FOLDER = "Unnamed"


@dataclass
class SavedApp:
    """An application chosen to open a link instead of the default browser."""
    name: str
    path: str
    bundle_id: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        data = {"name": self.name, "path": self.path}
        if self.bundle_id:
            data["bundleId"] = self.bundle_id
        return data

    @classmethod
    def from_dict(cls, data: Any) -> Optional["SavedApp"]:
        if not isinstance(data, dict):
            return None
        path = data.get("path") or ""
        name = data.get("name") or path
        if not name and not path:
            return None
        return cls(name=name, path=path, bundle_id=data.get("bundleId") or None)


@dataclass
class Link:
    """A bookmarked URL."""
    id: str
    title: str
    url: str
    icon: Optional[str] = None
    app: Optional[SavedApp] = None

    type = "link"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id, "type": "link", "title": self.title, "url": self.url}
        if self.icon:
            data["icon"] = self.icon
        if self.app:
            data["app"] = self.app.to_dict()
        return data


@dataclass
class Folder:
    """A folder of links and nested folders, in display order."""
    id: str
    title: str
    icon: Optional[str] = None
    items: List[Union["Link", "Folder"]] = field(default_factory=list)

    type = "folder"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id, "type": "folder", "title": self.title}
        if self.icon:
            data["icon"] = self.icon
        data["items"] = [item.to_dict() for item in self.items]
        return data


Item = Union[Link, Folder]


@dataclass
class Tree:
    """The whole persisted document: the ordered top-level items."""
    items: List[Item] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"items": [item.to_dict() for item in self.items]}


def item_from_dict(data: Any) -> Optional[Item]:
    """
    Build an item from its JSON form.
    
    Missing ids are generated and blank titles fall back to the url (links)
    or "Unnamed" (folders).
    
    Args:
        data: A decoded JSON object
        
    Returns:
        Link or Folder, or None if the entry cannot be interpreted
    """
    if not isinstance(data, dict):
        logger.warning(f"Skipping non-object item: {data!r}")
        return None
    
    item_type = data.get("type")
    if item_type is None:
        # Older hand-written files sometimes omit the tag
        item_type = "folder" if "items" in data else "link"
    
    item_id = data.get("id") or generate_id()
    icon = data.get("icon") or None
    
    if item_type == "link":
        url = data.get("url")
        if not isinstance(url, str) or not url:
            logger.warning(f"Skipping link without url (id={item_id})")
            return None
        return Link(
            id=item_id,
            title=data.get("title") or url,
            url=url,
            icon=icon,
            app=SavedApp.from_dict(data.get("app")),
        )
    
    if item_type == "folder":
        children = data.get("items")
        if not isinstance(children, list):
            children = []
        items = [child for child in (item_from_dict(c) for c in children) if child is not None]
        return Folder(
            id=item_id,
            title=data.get("title") or UNNAMED_FOLDER,
            icon=icon,
            items=items,
        )
    
    logger.warning(f"Skipping item with unknown type '{item_type}' (id={item_id})")
    return None

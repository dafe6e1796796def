"""User-level operations on the stored tree.

Every mutating action reloads the file, applies one change and saves it
again, so the file on disk is the only state.
"""

import logging
from typing import Callable, Dict, List, Optional

from .exceptions import ActiveTabUnavailableError, InvalidInputError
from .ids import generate_id
from .models import UNNAMED_FOLDER, Folder, Item, Link, SavedApp, Tree
from .monitoring import read_active_browser_tab
from .storage import LinkStorage, get_storage
from . import tree as tree_ops

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def _mutate(storage: Optional[LinkStorage], folder_id: Optional[str], updater) -> bool:
    storage = storage or get_storage()
    data = storage.load()
    found = tree_ops.update_folder(data, folder_id, updater)
    if not found:
        logger.warning(f"Folder '{folder_id}' not found, nothing changed")
        return False
    storage.save(data)
    return True


def _new_link(url: str, title: str = "", icon: str = "", app: Optional[SavedApp] = None,
              item_id: Optional[str] = None) -> Link:
    url = _clean(url)
    if not url:
        raise InvalidInputError("URL is required")
    return Link(
        id=item_id or generate_id(),
        title=_clean(title) or url,
        url=url,
        icon=_clean(icon) or None,
        app=app,
    )


def add_link(folder_id: Optional[str], url: str, title: str = "", icon: str = "",
             app: Optional[SavedApp] = None, storage: Optional[LinkStorage] = None) -> Optional[Link]:
    """
    Append a new link to a folder (None for the top level).
    
    Raises:
        InvalidInputError: If url is blank (checked before any file I/O)
    """
    link = _new_link(url, title, icon, app)
    if not _mutate(storage, folder_id, lambda items: tree_ops.append_item(items, link)):
        return None
    return link


def add_link_from_active_tab(folder_id: Optional[str],
                             reader: Callable[[], Optional[Dict[str, str]]] = read_active_browser_tab,
                             storage: Optional[LinkStorage] = None) -> Optional[Link]:
    """
    Append the frontmost browser tab as a link.
    
    Raises:
        UnsupportedPlatformError: If the platform cannot report browser tabs
        ActiveTabUnavailableError: If no supported browser answered
    """
    tab = reader()
    if not tab or not tab.get("url"):
        raise ActiveTabUnavailableError("Could not read active tab (supported: Safari, Google Chrome)")
    return add_link(folder_id, tab["url"], title=tab.get("title", ""), storage=storage)


def add_folder(folder_id: Optional[str], title: str = "", icon: str = "",
               storage: Optional[LinkStorage] = None) -> Optional[Folder]:
    folder = Folder(
        id=generate_id(),
        title=_clean(title) or UNNAMED_FOLDER,
        icon=_clean(icon) or None,
        items=[],
    )
    if not _mutate(storage, folder_id, lambda items: tree_ops.append_item(items, folder)):
        return None
    return folder


def edit_link(folder_id: Optional[str], link_id: str, url: str, title: str = "", icon: str = "",
              app: Optional[SavedApp] = None, storage: Optional[LinkStorage] = None) -> Optional[Link]:
    """Replace a link's fields, keeping its id and position."""
    link = _new_link(url, title, icon, app, item_id=link_id)
    if not _mutate(storage, folder_id, lambda items: tree_ops.replace_item(items, link_id, link)):
        return None
    return link


def edit_folder(folder_id: Optional[str], target_id: str, title: str = "", icon: str = "",
                storage: Optional[LinkStorage] = None) -> bool:
    """Rename a folder or change its icon, keeping its id and children."""
    def updater(items: List[Item]) -> List[Item]:
        result = []
        for item in items:
            if item.id == target_id and isinstance(item, Folder):
                item = Folder(
                    id=item.id,
                    title=_clean(title) or UNNAMED_FOLDER,
                    icon=_clean(icon) or None,
                    items=item.items,
                )
            result.append(item)
        return result
    
    return _mutate(storage, folder_id, updater)


def delete_item(folder_id: Optional[str], item_id: str, storage: Optional[LinkStorage] = None) -> bool:
    return _mutate(storage, folder_id, lambda items: tree_ops.remove_item(items, item_id))


def move_item(folder_id: Optional[str], item_id: str, delta: int,
              storage: Optional[LinkStorage] = None) -> bool:
    return _mutate(storage, folder_id, lambda items: tree_ops.move_item(items, item_id, delta))


def duplicate_item(folder_id: Optional[str], item_id: str, storage: Optional[LinkStorage] = None) -> bool:
    return _mutate(storage, folder_id, lambda items: tree_ops.duplicate_item(items, item_id))


def list_items(folder_id: Optional[str], storage: Optional[LinkStorage] = None) -> Optional[List[Item]]:
    """Get a folder's children from a fresh load, or None if the folder is unknown."""
    storage = storage or get_storage()
    return tree_ops.children_of(storage.load(), folder_id)


def load_tree(storage: Optional[LinkStorage] = None) -> Tree:
    return (storage or get_storage()).load()

"""Locating folders in the tree and transforming their child lists."""

from typing import Callable, Iterator, List, Optional

from .ids import generate_id
from .models import Folder, Item, Link, SavedApp, Tree

Updater = Callable[[List[Item]], List[Item]]

COPY_SUFFIX = " (Copy)"


def find_folder_path(items: List[Item], folder_id: str) -> Optional[List[int]]:
    """
    Depth-first search for a folder by id.
    
    Args:
        items: Sequence to search (typically tree.items)
        folder_id: Id of the folder to locate
        
    Returns:
        Index path from items down to the folder, or None if not found
    """
    for index, item in enumerate(items):
        if isinstance(item, Folder):
            if item.id == folder_id:
                return [index]
            sub_path = find_folder_path(item.items, folder_id)
            if sub_path is not None:
                return [index] + sub_path
    return None


def _folder_at(items: List[Item], path: List[int]) -> Folder:
    node = items[path[0]]
    for index in path[1:]:
        node = node.items[index]
    return node


def find_folder(tree: Tree, folder_id: str) -> Optional[Folder]:
    path = find_folder_path(tree.items, folder_id)
    if path is None:
        return None
    return _folder_at(tree.items, path)


def find_item(tree: Tree, item_id: str) -> Optional[Item]:
    """Find any item (link or folder) by id, anywhere in the tree."""
    stack = list(reversed(tree.items))
    while stack:
        item = stack.pop()
        if item.id == item_id:
            return item
        if isinstance(item, Folder):
            stack.extend(reversed(item.items))
    return None


def children_of(tree: Tree, folder_id: Optional[str]) -> Optional[List[Item]]:
    """
    Get the child list shown for a folder.
    
    Returns:
        tree.items for None, the folder's items, or None if the id is unknown
    """
    if folder_id is None:
        return tree.items
    folder = find_folder(tree, folder_id)
    return folder.items if folder is not None else None


def update_folder(tree: Tree, folder_id: Optional[str], updater: Updater) -> bool:
    """
    Replace a folder's children with updater(children).
    
    Args:
        tree: Tree to modify in place
        folder_id: Target folder id, or None for the top level
        updater: Pure function from the current child list to the new one
        
    Returns:
        True if the folder was found and updated, False otherwise (no-op)
    """
    if folder_id is None:
        tree.items = updater(list(tree.items))
        return True
    
    path = find_folder_path(tree.items, folder_id)
    if path is None:
        return False
    
    folder = _folder_at(tree.items, path)
    folder.items = updater(list(folder.items))
    return True


def deep_clone(item: Item) -> Item:
    """Copy an item subtree, assigning a fresh id at every level."""
    if isinstance(item, Link):
        app = None
        if item.app is not None:
            app = SavedApp(name=item.app.name, path=item.app.path, bundle_id=item.app.bundle_id)
        return Link(id=generate_id(), title=item.title, url=item.url, icon=item.icon, app=app)
    return Folder(
        id=generate_id(),
        title=item.title,
        icon=item.icon,
        items=[deep_clone(child) for child in item.items],
    )


def _index_of(items: List[Item], item_id: str) -> int:
    for index, item in enumerate(items):
        if item.id == item_id:
            return index
    return -1


# Child-list transforms. Each returns a new list and leaves its input untouched.

def append_item(items: List[Item], new_item: Item) -> List[Item]:
    return items + [new_item]


def remove_item(items: List[Item], item_id: str) -> List[Item]:
    return [item for item in items if item.id != item_id]


def replace_item(items: List[Item], item_id: str, replacement: Item) -> List[Item]:
    return [replacement if item.id == item_id else item for item in items]


def move_item(items: List[Item], item_id: str, delta: int) -> List[Item]:
    """
    Move an item by delta positions within its list.
    
    Moving the first item up or the last item down returns the list unchanged.
    """
    index = _index_of(items, item_id)
    if index == -1:
        return list(items)
    new_index = index + delta
    if new_index < 0 or new_index >= len(items):
        return list(items)
    result = list(items)
    moved = result.pop(index)
    result.insert(new_index, moved)
    return result


def duplicate_item(items: List[Item], item_id: str) -> List[Item]:
    """Insert a deep clone titled '<title> (Copy)' right after the item."""
    index = _index_of(items, item_id)
    if index == -1:
        return list(items)
    clone = deep_clone(items[index])
    clone.title = f"{clone.title}{COPY_SUFFIX}"
    result = list(items)
    result.insert(index + 1, clone)
    return result


def iter_links(folder: Folder) -> Iterator[Link]:
    """Yield every link under a folder, depth-first in pre-order."""
    for child in folder.items:
        if isinstance(child, Link):
            yield child
        elif isinstance(child, Folder):
            yield from iter_links(child)


def collect_links(folder: Folder) -> List[Link]:
    return list(iter_links(folder))

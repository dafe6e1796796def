"""Command to list the contents of a folder."""

from typing import Any, Dict, List

from .base import Command
from .. import actions
from ..models import Folder, Item


def format_item(item: Item) -> str:
    icon = f"{item.icon} " if item.icon else ""
    if isinstance(item, Folder):
        return f"{icon}{item.title}/  [{item.id}]  {len(item.items)} item(s)"
    suffix = f"  (opens in {item.app.name})" if item.app else ""
    return f"{icon}{item.title}  [{item.id}]  {item.url}{suffix}"


class ListItemsCommand(Command):
    """Command to print the items of a folder."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "list_items"
    
    def produces_results(self) -> bool:
        return True
    
    def execute(self, intent: Dict[str, Any]) -> bool:
        folder_id = intent.get("folder_id")
        items = actions.list_items(folder_id, storage=self.storage)
        if items is None:
            print(f"Error: Folder '{folder_id}' not found")
            return False
        
        if not items:
            print("Folder is empty. Use 'add-link' to add a link, or 'add-folder' to add a subfolder.")
            return True
        
        for line in self._render(items, recursive=intent.get("recursive", False)):
            print(line)
        return True
    
    def _render(self, items: List[Item], recursive: bool, depth: int = 0) -> List[str]:
        lines = []
        for i, item in enumerate(items, 1):
            lines.append(f"{'  ' * depth}{i}. {format_item(item)}")
            if recursive and isinstance(item, Folder):
                lines.extend(self._render(item.items, recursive, depth + 1))
        return lines

"""Commands to open a single link or every link in a folder."""

from typing import Any, Dict

from .base import Command
from .add_link import resolve_app
from ..models import Folder
from ..tree import find_folder, find_item


class OpenLinkCommand(Command):
    """Command to open a saved link (by id) or a raw URL."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "open_link"
    
    def execute(self, intent: Dict[str, Any]) -> bool:
        item_id = intent.get("item_id")
        if item_id:
            item = find_item(self.storage.load(), item_id)
            if item is None:
                print(f"Error: Item '{item_id}' not found")
                return False
            if isinstance(item, Folder):
                print(f"Error: '{item.title}' is a folder, use open-all")
                return False
            url, app = item.url, item.app
        else:
            url = (intent.get("url") or "").strip()
            if not url:
                print("Error: No URL specified")
                return False
            ok, app = resolve_app(intent.get("app"))
            if not ok:
                return False
        
        print(f"Opening '{url}'" + (f" in {app.name}..." if app else "..."))
        success = self.launcher.open(url, app)
        
        if success:
            print("✓ Successfully opened URL\n")
        else:
            print("✗ Failed to open URL\n")
        
        return success


class OpenAllCommand(Command):
    """Command to open every link in a folder, including nested folders."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "open_all"
    
    def execute(self, intent: Dict[str, Any]) -> bool:
        folder_id = intent.get("folder_id")
        if not folder_id:
            print("Error: No folder specified")
            return False
        
        folder = find_folder(self.storage.load(), folder_id)
        if folder is None:
            print(f"Error: Folder '{folder_id}' not found")
            return False
        
        result = self.launcher.open_all(folder)
        if result.nothing_to_open:
            print(f"✗ {result.summary()}\n")
            return False
        
        print(f"✓ {result.summary()}\n")
        return True

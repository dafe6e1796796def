"""Command to create a folder."""

from typing import Any, Dict

from .base import Command
from .. import actions


class AddFolderCommand(Command):
    """Command to create a folder inside another folder (or at the top level)."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "add_folder"
    
    def execute(self, intent: Dict[str, Any]) -> bool:
        folder = actions.add_folder(
            intent.get("folder_id"),
            title=intent.get("title", ""),
            icon=intent.get("icon", ""),
            storage=self.storage,
        )
        if folder is None:
            print("✗ Folder not found\n")
            return False
        
        print(f"✓ Folder created: {folder.title} ({folder.id})\n")
        return True

"""Commands that delete, move or duplicate an item within its folder."""

from typing import Any, Dict

from .base import Command
from .. import actions


class DeleteItemCommand(Command):
    """Command to delete a link or a folder with all its contents."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "delete_item"
    
    def execute(self, intent: Dict[str, Any]) -> bool:
        item_id = intent.get("item_id")
        if not item_id:
            print("Error: No item specified")
            return False
        
        if self.find_child(intent.get("folder_id"), item_id) is None:
            print(f"Error: Item '{item_id}' not found in this folder")
            return False
        
        if not actions.delete_item(intent.get("folder_id"), item_id, storage=self.storage):
            print("✗ Parent folder not found\n")
            return False
        
        print("✓ Deleted successfully\n")
        return True


class MoveItemCommand(Command):
    """Command to move an item up or down by one position."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "move_item"
    
    def execute(self, intent: Dict[str, Any]) -> bool:
        item_id = intent.get("item_id")
        if not item_id:
            print("Error: No item specified")
            return False
        
        if self.find_child(intent.get("folder_id"), item_id) is None:
            print(f"Error: Item '{item_id}' not found in this folder")
            return False
        
        delta = intent.get("delta", 0)
        if delta not in (-1, 1):
            print(f"Error: Invalid move delta: {delta} (must be -1 or 1)")
            return False
        
        return actions.move_item(intent.get("folder_id"), item_id, delta, storage=self.storage)


class DuplicateItemCommand(Command):
    """Command to duplicate an item right after itself."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "duplicate_item"
    
    def execute(self, intent: Dict[str, Any]) -> bool:
        item_id = intent.get("item_id")
        if not item_id:
            print("Error: No item specified")
            return False
        
        if self.find_child(intent.get("folder_id"), item_id) is None:
            print(f"Error: Item '{item_id}' not found in this folder")
            return False
        
        if not actions.duplicate_item(intent.get("folder_id"), item_id, storage=self.storage):
            print("✗ Parent folder not found\n")
            return False
        
        print("✓ Duplicated\n")
        return True

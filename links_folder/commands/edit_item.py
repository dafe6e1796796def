"""Commands that edit an existing link or folder in place."""

from typing import Any, Dict

from .base import Command
from .add_link import resolve_app
from .. import actions
from ..exceptions import LinksFolderError
from ..models import Folder, Link


class EditLinkCommand(Command):
    """Command to update a link's url, title, icon or application.
    
    Fields missing from the intent keep their current values.
    """
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "edit_link"
    
    def execute(self, intent: Dict[str, Any]) -> bool:
        link_id = intent.get("item_id")
        if not link_id:
            print("Error: No link specified")
            return False
        
        current = self.find_child(intent.get("folder_id"), link_id)
        if not isinstance(current, Link):
            print(f"Error: Link '{link_id}' not found in this folder")
            return False
        
        if "app" in intent:
            ok, app = resolve_app(intent.get("app"))
            if not ok:
                return False
        else:
            app = current.app
        
        try:
            link = actions.edit_link(
                intent.get("folder_id"),
                link_id,
                intent.get("url", current.url),
                title=intent.get("title", current.title),
                icon=intent.get("icon", current.icon or ""),
                app=app,
                storage=self.storage,
            )
        except LinksFolderError as e:
            print(f"✗ {e}\n")
            return False
        
        if link is None:
            print("✗ Parent folder not found\n")
            return False
        
        print("✓ Link updated\n")
        return True


class EditFolderCommand(Command):
    """Command to rename a folder or change its icon."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "edit_folder"
    
    def execute(self, intent: Dict[str, Any]) -> bool:
        target_id = intent.get("item_id")
        if not target_id:
            print("Error: No folder specified")
            return False
        
        current = self.find_child(intent.get("folder_id"), target_id)
        if not isinstance(current, Folder):
            print(f"Error: Folder '{target_id}' not found in this folder")
            return False
        
        if not actions.edit_folder(
            intent.get("folder_id"),
            target_id,
            title=intent.get("title", current.title),
            icon=intent.get("icon", current.icon or ""),
            storage=self.storage,
        ):
            print("✗ Parent folder not found\n")
            return False
        
        print("✓ Folder updated\n")
        return True

"""Commands that add links: manually or from the active browser tab."""

from typing import Any, Dict, Optional, Tuple

from .base import Command
from .. import actions
from ..exceptions import LinksFolderError
from ..models import SavedApp
from ..monitoring import find_application, read_active_browser_tab


def resolve_app(value: Any) -> Tuple[bool, Optional[SavedApp]]:
    """
    Resolve the intent's 'app' field.
    
    Returns:
        Tuple of (ok, app); ok is False when a name was given but not found
    """
    if not value:
        return True, None
    if isinstance(value, SavedApp):
        return True, value
    app = find_application(str(value))
    if app is None:
        print(f"Error: Application '{value}' is not installed")
        return False, None
    return True, app


class AddLinkCommand(Command):
    """Command to add a link to a folder."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "add_link"
    
    def execute(self, intent: Dict[str, Any]) -> bool:
        ok, app = resolve_app(intent.get("app"))
        if not ok:
            return False
        
        try:
            link = actions.add_link(
                intent.get("folder_id"),
                intent.get("url", ""),
                title=intent.get("title", ""),
                icon=intent.get("icon", ""),
                app=app,
                storage=self.storage,
            )
        except LinksFolderError as e:
            print(f"✗ {e}\n")
            return False
        
        if link is None:
            print("✗ Folder not found\n")
            return False
        
        print(f"✓ Link added: {link.title} ({link.id})\n")
        return True


class AddLinkFromTabCommand(Command):
    """Command to add the frontmost browser tab as a link."""
    
    def __init__(self, storage=None, launcher=None, tab_reader=None):
        super().__init__(storage, launcher)
        self.tab_reader = tab_reader or read_active_browser_tab
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "add_link_from_tab"
    
    def execute(self, intent: Dict[str, Any]) -> bool:
        try:
            link = actions.add_link_from_active_tab(
                intent.get("folder_id"),
                reader=self.tab_reader,
                storage=self.storage,
            )
        except LinksFolderError as e:
            print(f"✗ {e}\n")
            return False
        
        if link is None:
            print("✗ Folder not found\n")
            return False
        
        print(f"✓ Link added from active tab: {link.title}\n")
        return True

"""Command to list installed applications usable with --app."""

from typing import Any, Dict

from .base import Command
from ..monitoring import list_installed_applications


class ListAppsCommand(Command):
    """Command to list installed applications."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "list_apps"
    
    def produces_results(self) -> bool:
        return True
    
    def execute(self, intent: Dict[str, Any]) -> bool:
        apps = list_installed_applications()
        if not apps:
            print("No applications found.")
            return True
        
        for i, app in enumerate(apps, 1):
            bundle = f"  ({app.bundle_id})" if app.bundle_id else ""
            print(f"{i}. {app.name}{bundle}")
        return True

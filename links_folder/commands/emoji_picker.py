"""Command to open the system emoji picker."""

from typing import Any, Dict

from .base import Command
from ..emoji_picker import open_system_emoji_picker
from ..exceptions import UnsupportedPlatformError


class EmojiPickerCommand(Command):
    """Command to show the OS emoji picker for choosing an icon."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "emoji_picker"
    
    def execute(self, intent: Dict[str, Any]) -> bool:
        try:
            opened = open_system_emoji_picker()
        except UnsupportedPlatformError as e:
            print(f"✗ {e}\n")
            return False
        if not opened:
            print("✗ Action failed. Check Accessibility permissions in System Settings.\n")
        return opened

"""Command executor to route intents to appropriate command classes."""

from typing import Any, Dict, List, Optional

from .base import Command
from .add_link import AddLinkCommand, AddLinkFromTabCommand
from .add_folder import AddFolderCommand
from .edit_item import EditLinkCommand, EditFolderCommand
from .manage_item import DeleteItemCommand, MoveItemCommand, DuplicateItemCommand
from .list_items import ListItemsCommand
from .open_links import OpenLinkCommand, OpenAllCommand
from .export_links import ExportCommand
from .list_apps import ListAppsCommand
from .emoji_picker import EmojiPickerCommand
from ..launcher import LinkLauncher
from ..storage import LinkStorage


class CommandExecutor:
    """Executes commands based on intents."""
    
    def __init__(self, storage: Optional[LinkStorage] = None, launcher: Optional[LinkLauncher] = None,
                 tab_reader=None):
        """
        Initialize the command executor with available commands.
        
        Args:
            storage: Storage shared by all commands (defaults to configured storage)
            launcher: Launcher used by open commands (defaults to the platform opener)
            tab_reader: Replacement for the active-tab reader
        """
        shared = {"storage": storage, "launcher": launcher}
        self.commands: List[Command] = [
            ListItemsCommand(**shared),
            AddLinkCommand(**shared),
            AddLinkFromTabCommand(tab_reader=tab_reader, **shared),
            AddFolderCommand(**shared),
            EditLinkCommand(**shared),
            EditFolderCommand(**shared),
            DeleteItemCommand(**shared),
            MoveItemCommand(**shared),
            DuplicateItemCommand(**shared),
            OpenLinkCommand(**shared),
            OpenAllCommand(**shared),
            ExportCommand(**shared),
            ListAppsCommand(**shared),
            EmojiPickerCommand(**shared),
        ]
    
    def execute(self, intent: Any) -> bool:
        """
        Execute command(s) based on the intent(s).
        
        Args:
            intent: Can be:
                - A single intent dictionary with a 'type' field
                - A list of intent dictionaries
                - A dictionary with a 'commands' array
            
        Returns:
            True if all executions succeeded, False if any failed
        """
        commands_list = self._normalize_to_commands_list(intent)
        
        if not commands_list:
            print("Error: No commands to execute\n")
            return False
        
        # Execute each command sequentially
        all_succeeded = True
        for i, cmd_intent in enumerate(commands_list, 1):
            if len(commands_list) > 1:
                print(f"Executing command {i} of {len(commands_list)}...")
            
            intent_type = cmd_intent.get("type", "list_items")
            command = self.find_command(intent_type)
            if command is None:
                print(f"Unknown intent type: {intent_type}\n")
                all_succeeded = False
                continue
            
            if not command.execute(cmd_intent):
                all_succeeded = False
        
        return all_succeeded
    
    def find_command(self, intent_type: str) -> Optional[Command]:
        for command in self.commands:
            if command.can_handle(intent_type):
                return command
        return None
    
    def _normalize_to_commands_list(self, intent: Any) -> List[Dict[str, Any]]:
        """
        Normalize various intent formats to a list of command intents.
        
        Args:
            intent: A dict with 'commands' array, a list of intents, or a single intent dict
            
        Returns:
            List of intent dictionaries
        """
        if isinstance(intent, list):
            return [i for i in intent if isinstance(i, dict)]
        if isinstance(intent, dict):
            if "commands" in intent:
                commands = intent.get("commands", [])
                if isinstance(commands, list):
                    return commands
                return [commands] if commands else []
            return [intent]
        return []

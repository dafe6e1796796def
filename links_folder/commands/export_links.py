"""Command to export the links file."""

from typing import Any, Dict

from .base import Command
from ..exceptions import LinksFolderError
from ..export import export_links, get_last_export_folder


class ExportCommand(Command):
    """Command to copy links.json into a folder under a timestamped name."""
    
    def can_handle(self, intent_type: str) -> bool:
        return intent_type == "export"
    
    def execute(self, intent: Dict[str, Any]) -> bool:
        destination = intent.get("destination")
        if destination is None:
            destination = get_last_export_folder(self.storage.support_dir)
        
        try:
            export_path = export_links(destination, storage=self.storage)
        except LinksFolderError as e:
            print(f"✗ {e}\n")
            return False
        except OSError as e:
            print(f"✗ Export failed: {e}\n")
            return False
        
        print(f"✓ Exported successfully. Saved as {export_path.name} in {export_path.parent}\n")
        return True

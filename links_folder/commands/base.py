"""Base command class for links folder commands."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..launcher import LinkLauncher
from ..models import Item
from ..storage import LinkStorage, get_storage
from ..tree import children_of


class Command(ABC):
    """Abstract base class for links folder commands."""
    
    def __init__(self, storage: Optional[LinkStorage] = None, launcher: Optional[LinkLauncher] = None):
        self._storage = storage
        self._launcher = launcher
    
    @property
    def storage(self) -> LinkStorage:
        if self._storage is None:
            self._storage = get_storage()
        return self._storage
    
    @property
    def launcher(self) -> LinkLauncher:
        if self._launcher is None:
            self._launcher = LinkLauncher()
        return self._launcher
    
    def find_child(self, folder_id: Optional[str], item_id: str) -> Optional[Item]:
        """
        Find a direct child of a folder (None for the top level) in a fresh load.
        
        Returns:
            The item, or None if the folder is unknown or does not contain it
        """
        items = children_of(self.storage.load(), folder_id) or []
        for item in items:
            if item.id == item_id:
                return item
        return None
    
    @abstractmethod
    def execute(self, intent: Dict[str, Any]) -> bool:
        """
        Execute the command based on the intent.
        
        Args:
            intent: Intent dictionary with command-specific fields
            
        Returns:
            True if execution succeeded, False otherwise
        """
        pass
    
    @abstractmethod
    def can_handle(self, intent_type: str) -> bool:
        """
        Check if this command can handle the given intent type.
        
        Args:
            intent_type: The intent type string
            
        Returns:
            True if this command can handle the intent type
        """
        pass
    
    def produces_results(self) -> bool:
        """
        Return True if this command produces displayable results.
        
        Query commands (list_*) return True.
        Action commands (add, move, delete, etc.) return False (default).
        """
        return False

"""Loading and saving the links tree as JSON."""

import json
import logging
import os
from pathlib import Path
from typing import Any, List, Optional, Union

from . import config
from .config import LINKS_FILENAME
from .migrate import migrate
from .models import Tree

logger = logging.getLogger(__name__)


class LinkStorage:
    """Reads and writes links.json across the configured candidate locations."""
    
    def __init__(
        self,
        user_path: Optional[Union[str, Path]] = None,
        support_dir: Union[str, Path] = "~/.links_folder",
        assets_dir: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize the storage.
        
        Args:
            user_path: Absolute path overriding the default file, if set
            support_dir: Per-install directory holding the default links.json
            assets_dir: Directory holding the bundled default links.json
        """
        self.user_path = Path(user_path).expanduser() if user_path else None
        self.support_dir = Path(support_dir).expanduser()
        self.assets_dir = Path(assets_dir) if assets_dir else None
    
    @property
    def support_path(self) -> Path:
        return self.support_dir / LINKS_FILENAME
    
    def candidate_paths(self) -> List[Path]:
        """
        Get the paths tried by load(), in priority order.
        
        Priority:
        1. User-configured path
        2. links.json in the support directory
        3. links.json in the bundled assets directory
        """
        candidates = []
        if self.user_path:
            candidates.append(self.user_path)
        candidates.append(self.support_path)
        if self.assets_dir:
            candidates.append(self.assets_dir / LINKS_FILENAME)
        return candidates
    
    def source_path(self) -> Path:
        """Get the path save() writes to."""
        return self.user_path or self.support_path
    
    def _read_json(self, path: Path) -> Optional[Any]:
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in links file '{path}': {e}")
        except OSError as e:
            logger.error(f"Failed to read links file '{path}': {e}")
        return None
    
    def load(self) -> Tree:
        """
        Load the tree from the first readable candidate path.
        
        Returns:
            The migrated tree, or an empty tree if no candidate could be read
        """
        for path in self.candidate_paths():
            raw = self._read_json(path)
            if raw is not None:
                logger.debug(f"Loaded links from {path}")
                return migrate(raw)
        
        logger.debug("No links file found, starting with an empty tree")
        return Tree()
    
    def save(self, tree: Tree) -> Path:
        """
        Write the tree to the user path or the support directory.
        
        Args:
            tree: Tree to persist
            
        Returns:
            Path written to
        """
        target = self.source_path()
        os.makedirs(target.parent, exist_ok=True)
        with target.open("w", encoding="utf-8") as f:
            json.dump(tree.to_dict(), f, indent=2, ensure_ascii=False)
        logger.debug(f"Saved links to {target}")
        return target


def get_storage() -> LinkStorage:
    """Build a storage from the current configuration."""
    return LinkStorage(
        user_path=config.LINKS_PATH,
        support_dir=config.SUPPORT_DIR,
        assets_dir=config.ASSETS_DIR,
    )


def load_links() -> Tree:
    return get_storage().load()


def save_links(tree: Tree) -> Path:
    return get_storage().save(tree)

"""Configuration for the links folder."""

import logging
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LINKS_FILENAME = "links.json"
EXPORT_STATE_FILENAME = "export_state.json"

_PACKAGE_DIR = Path(__file__).parent


class Config:
    """Configuration class for the links folder."""
    
    def __init__(self):
        """Initialize configuration from environment variables."""
        # Optional absolute path overriding where links.json lives
        links_path = os.getenv("LINKS_FOLDER_PATH", "").strip()
        self.links_path: Optional[str] = os.path.expanduser(links_path) if links_path else None
        
        # Per-install support directory (default save location)
        self.support_dir = os.path.expanduser(
            os.getenv("LINKS_FOLDER_SUPPORT_DIR", "~/.links_folder")
        )
        
        # Bundled defaults shipped with the package
        self.assets_dir = os.getenv("LINKS_FOLDER_ASSETS_DIR", str(_PACKAGE_DIR / "assets"))
        
        self.log_level = os.getenv("LINKS_FOLDER_LOG_LEVEL", "WARNING").upper()
        
        # Validate configuration
        self._validate()
    
    def _validate(self):
        """Validate configuration values."""
        if self.links_path is not None and not os.path.isabs(self.links_path):
            raise ValueError(
                f"LINKS_FOLDER_PATH must be an absolute path, got '{self.links_path}'"
            )
        
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level not in valid_levels:
            raise ValueError(
                f"Invalid log level '{self.log_level}'. "
                f"Must be one of: {', '.join(valid_levels)}"
            )
    
    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


# Create a global config instance
_config = Config()

# Expose configuration values as module-level variables
LINKS_PATH = _config.links_path
SUPPORT_DIR = _config.support_dir
ASSETS_DIR = _config.assets_dir
LOG_LEVEL = _config.log_level

__all__ = [
    "Config",
    "LINKS_FILENAME",
    "EXPORT_STATE_FILENAME",
    "LINKS_PATH",
    "SUPPORT_DIR",
    "ASSETS_DIR",
    "LOG_LEVEL",
]

"""Links folder: a tree of bookmark folders stored as JSON."""

from .models import SavedApp, Link, Folder, Tree
from .migrate import migrate, parse_document
from .storage import LinkStorage, load_links, save_links
from .tree import update_folder, find_folder, deep_clone, collect_links
from .launcher import LinkLauncher, OpenAllResult, get_opener
from .ids import generate_id

__all__ = [
    # Models
    "SavedApp",
    "Link",
    "Folder",
    "Tree",
    # Migration & storage
    "migrate",
    "parse_document",
    "LinkStorage",
    "load_links",
    "save_links",
    # Tree operations
    "update_folder",
    "find_folder",
    "deep_clone",
    "collect_links",
    # Launching
    "LinkLauncher",
    "OpenAllResult",
    "get_opener",
    "generate_id",
]

"""Command execution layer for links folder intents."""

from .base import Command
from .executor import CommandExecutor
from .add_link import AddLinkCommand, AddLinkFromTabCommand
from .add_folder import AddFolderCommand
from .edit_item import EditLinkCommand, EditFolderCommand
from .manage_item import DeleteItemCommand, MoveItemCommand, DuplicateItemCommand
from .list_items import ListItemsCommand
from .open_links import OpenLinkCommand, OpenAllCommand
from .export_links import ExportCommand

__all__ = [
    "Command",
    "CommandExecutor",
    "AddLinkCommand",
    "AddLinkFromTabCommand",
    "AddFolderCommand",
    "EditLinkCommand",
    "EditFolderCommand",
    "DeleteItemCommand",
    "MoveItemCommand",
    "DuplicateItemCommand",
    "ListItemsCommand",
    "OpenLinkCommand",
    "OpenAllCommand",
    "ExportCommand",
]

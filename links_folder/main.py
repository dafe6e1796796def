"""Command-line entry point for the links folder."""

import argparse
import sys
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from . import config
from .commands import CommandExecutor
from .log import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="links-folder",
        description="Organize bookmarks in nested folders and open them from the terminal.",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    
    def with_folder(p: argparse.ArgumentParser, help_text: str = "Parent folder id (default: top level)"):
        p.add_argument("--folder", dest="folder_id", default=None, help=help_text)
        return p
    
    p = with_folder(sub.add_parser("list", help="List the items of a folder"), "Folder id to list")
    p.add_argument("-r", "--recursive", action="store_true", help="Include nested folders")
    
    p = with_folder(sub.add_parser("add-link", help="Add a link"))
    p.add_argument("url")
    p.add_argument("--title", default="")
    p.add_argument("--icon", default="")
    p.add_argument("--app", default=None, help="Application name, bundle id or path to open the link with")
    
    with_folder(sub.add_parser("add-from-tab", help="Add the active Safari/Chrome tab (macOS)"))
    
    p = with_folder(sub.add_parser("add-folder", help="Create a folder"))
    p.add_argument("title", nargs="?", default="")
    p.add_argument("--icon", default="")
    
    p = with_folder(sub.add_parser("edit-link", help="Edit a link"))
    p.add_argument("item_id")
    p.add_argument("--url")
    p.add_argument("--title")
    p.add_argument("--icon")
    p.add_argument("--app", help="Application to open with ('' for the default browser)")
    
    p = with_folder(sub.add_parser("edit-folder", help="Rename a folder or change its icon"))
    p.add_argument("item_id")
    p.add_argument("--title")
    p.add_argument("--icon")
    
    p = with_folder(sub.add_parser("delete", help="Delete a link or folder"))
    p.add_argument("item_id")
    p.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation")
    
    p = with_folder(sub.add_parser("move", help="Move an item up or down by one"))
    p.add_argument("item_id")
    p.add_argument("direction", choices=["up", "down"])
    
    p = with_folder(sub.add_parser("duplicate", help="Duplicate an item"))
    p.add_argument("item_id")
    
    p = sub.add_parser("open", help="Open a saved link by id, or a URL")
    p.add_argument("target", help="Link id or URL")
    p.add_argument("--app", default=None)
    
    p = sub.add_parser("open-all", help="Open every link in a folder")
    p.add_argument("folder_id")
    
    p = sub.add_parser("export", help="Export links.json to a folder")
    p.add_argument("destination", nargs="?", default=None, help="Defaults to the last export folder")
    
    sub.add_parser("apps", help="List installed applications")
    sub.add_parser("emoji", help="Open the system emoji picker")
    
    return parser


def _drop_none(intent: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in intent.items() if value is not None or key == "folder_id"}


def args_to_intent(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate parsed arguments into an intent dictionary."""
    command = args.command
    folder_id = getattr(args, "folder_id", None)
    
    if command == "list":
        return {"type": "list_items", "folder_id": folder_id, "recursive": args.recursive}
    if command == "add-link":
        return {"type": "add_link", "folder_id": folder_id, "url": args.url,
                "title": args.title, "icon": args.icon, "app": args.app}
    if command == "add-from-tab":
        return {"type": "add_link_from_tab", "folder_id": folder_id}
    if command == "add-folder":
        return {"type": "add_folder", "folder_id": folder_id, "title": args.title, "icon": args.icon}
    if command == "edit-link":
        return _drop_none({"type": "edit_link", "folder_id": folder_id, "item_id": args.item_id,
                           "url": args.url, "title": args.title, "icon": args.icon, "app": args.app})
    if command == "edit-folder":
        return _drop_none({"type": "edit_folder", "folder_id": folder_id, "item_id": args.item_id,
                           "title": args.title, "icon": args.icon})
    if command == "delete":
        return {"type": "delete_item", "folder_id": folder_id, "item_id": args.item_id}
    if command == "move":
        return {"type": "move_item", "folder_id": folder_id, "item_id": args.item_id,
                "delta": -1 if args.direction == "up" else 1}
    if command == "duplicate":
        return {"type": "duplicate_item", "folder_id": folder_id, "item_id": args.item_id}
    if command == "open":
        if urlparse(args.target).scheme:
            return {"type": "open_link", "url": args.target, "app": args.app}
        return {"type": "open_link", "item_id": args.target}
    if command == "open-all":
        return {"type": "open_all", "folder_id": args.folder_id}
    if command == "export":
        return {"type": "export", "destination": args.destination}
    if command == "apps":
        return {"type": "list_apps"}
    return {"type": "emoji_picker"}


def confirm(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    setup_logging(config.Config().log_level_value)
    args = build_parser().parse_args(argv)
    
    if args.command == "delete" and not args.yes:
        if not confirm(f"Delete '{args.item_id}'? Folders are removed with all their contents."):
            print("Cancelled.")
            return 1
    
    executor = CommandExecutor()
    return 0 if executor.execute(args_to_intent(args)) else 1


if __name__ == "__main__":
    sys.exit(main())

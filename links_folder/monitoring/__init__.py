"""Host queries: the active browser tab and installed applications."""

from .tab_monitor import read_active_browser_tab
from .app_monitor import list_installed_applications, find_application

__all__ = [
    "read_active_browser_tab",
    "list_installed_applications",
    "find_application",
]

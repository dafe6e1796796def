"""Reading the active browser tab using AppleScript."""

import logging
import sys
from typing import Dict, Optional

from ..exceptions import UnsupportedPlatformError
from ..utils import AppleScriptExecutor

logger = logging.getLogger(__name__)

# Create a module-level executor instance
_executor = AppleScriptExecutor()

# Browsers queried in order; each script prints "url\ntitle"
BROWSER_SCRIPTS = [
    ("Safari", '''
    try
        tell application "Safari"
            return (URL of front document) & linefeed & (name of front document)
        end tell
    end try
    '''),
    ("Google Chrome", '''
    try
        tell application "Google Chrome"
            return (URL of active tab of front window) & linefeed & (title of active tab of front window)
        end tell
    end try
    '''),
]


def _parse_tab_output(stdout: Optional[str]) -> Optional[Dict[str, str]]:
    if not stdout:
        return None
    url, _, title = stdout.partition("\n")
    url = url.strip()
    if not url:
        return None
    return {"url": url, "title": title.strip() or url}


def read_active_browser_tab(platform: str = None) -> Optional[Dict[str, str]]:
    """
    Get the url and title of the frontmost browser tab.
    
    Args:
        platform: Platform string (defaults to sys.platform)
        
    Returns:
        Dict with url and title, or None if no supported browser answered
        
    Raises:
        UnsupportedPlatformError: If not running on macOS
    """
    platform = platform or sys.platform
    if platform != "darwin":
        raise UnsupportedPlatformError("Adding from active tab is only supported on macOS")
    
    for browser, script in BROWSER_SCRIPTS:
        success, stdout, stderr = _executor.execute(script)
        if not success:
            logger.debug(f"{browser} did not report an active tab: {stderr}")
            continue
        tab = _parse_tab_output(stdout)
        if tab:
            return tab
    
    return None

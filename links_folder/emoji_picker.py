"""Opening the macOS character viewer for picking icon emoji."""

import logging
import sys

from .exceptions import UnsupportedPlatformError
from .utils import AppleScriptExecutor

logger = logging.getLogger(__name__)

_executor = AppleScriptExecutor()

# ctrl+cmd+space
EMOJI_PICKER_SCRIPT = '''
delay 0.2
tell application "System Events" to key code 49 using {control down, command down}
'''


def open_system_emoji_picker(platform: str = None) -> bool:
    """
    Show the system emoji picker.
    
    Returns:
        True if successful, False otherwise (usually missing Accessibility permission)
        
    Raises:
        UnsupportedPlatformError: If not running on macOS
    """
    if (platform or sys.platform) != "darwin":
        raise UnsupportedPlatformError("The emoji picker is only available on macOS")
    success, _, stderr = _executor.execute(EMOJI_PICKER_SCRIPT)
    if not success:
        logger.error(f"Failed to open emoji picker: {stderr}")
    return success

"""AppleScript execution utilities."""

import subprocess
from typing import Optional, Tuple

from ..exceptions import AppleScriptError


class AppleScriptExecutor:
    """Runs osascript with standardized error handling."""
    
    def execute(self, script: str) -> Tuple[bool, Optional[str], Optional[str]]:
        """
        Execute an AppleScript snippet.
        
        Args:
            script: AppleScript code to execute
            
        Returns:
            Tuple of (success, stdout, stderr)
            - success: True if return code is 0, False otherwise
            - stdout: Standard output (None if empty)
            - stderr: Standard error (None if empty)
        """
        try:
            result = subprocess.run(
                ["osascript", "-e", script],
                capture_output=True,
                text=True,
            )
        except OSError as e:
            return False, None, str(e)
        
        success = result.returncode == 0
        stdout = result.stdout.strip() or None
        stderr = result.stderr.strip() or None
        return success, stdout, stderr
    
    def run(self, script: str) -> Optional[str]:
        """
        Execute an AppleScript snippet, raising on failure.
        
        Returns:
            Standard output or None
            
        Raises:
            AppleScriptError: If osascript exits non-zero or cannot be started
        """
        success, stdout, stderr = self.execute(script)
        if not success:
            raise AppleScriptError(stderr or "osascript failed")
        return stdout

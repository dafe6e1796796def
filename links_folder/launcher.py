"""Opening links through the host operating system."""

import logging
import subprocess
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Union

from .exceptions import OpenError
from .models import Folder, SavedApp
from .tree import collect_links

logger = logging.getLogger(__name__)


class Opener(ABC):
    """Platform capability for handing a URL to the OS."""
    
    supports_app_targeting = False
    
    @abstractmethod
    def build_command(self, url: str, app: Optional[SavedApp] = None) -> Union[List[str], str]:
        """Build the argument vector (or, on Windows, the command line) that opens url."""
        pass
    
    def open_url(self, url: str, app: Optional[SavedApp] = None) -> None:
        """
        Open a URL, blocking until the OS command exits.
        
        Raises:
            OpenError: If the command cannot be started or exits non-zero
        """
        command = self.build_command(url, app if self.supports_app_targeting else None)
        program = command.split()[0] if isinstance(command, str) else command[0]
        try:
            subprocess.run(command, check=True, capture_output=True)
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode(errors="replace").strip() if e.stderr else ""
            raise OpenError(f"{program} exited with {e.returncode}: {stderr}") from e
        except OSError as e:
            raise OpenError(f"Could not run {program}: {e}") from e
        except ValueError as e:
            # e.g. an embedded null byte in a url read from JSON
            raise OpenError(f"Invalid command for {url!r}: {e}") from e


class MacOpener(Opener):
    """macOS `open`, targeting an app by bundle id or path when given."""
    
    supports_app_targeting = True
    
    def build_command(self, url: str, app: Optional[SavedApp] = None) -> List[str]:
        if app is not None:
            if app.bundle_id:
                return ["open", "-b", app.bundle_id, url]
            return ["open", "-a", app.path, url]
        return ["open", url]


class WindowsOpener(Opener):
    """Windows `start` via cmd.exe."""
    
    def build_command(self, url: str, app: Optional[SavedApp] = None) -> str:
        # A preformatted command line: cmd.exe would split an unquoted url at "&".
        # The empty first argument is the window title.
        quoted = url.replace('"', "%22")
        return f'cmd /c start "" "{quoted}"'


class XdgOpener(Opener):
    """freedesktop `xdg-open`."""
    
    def build_command(self, url: str, app: Optional[SavedApp] = None) -> List[str]:
        return ["xdg-open", url]


def get_opener(platform: str = None) -> Opener:
    """Select the opener for a platform string (defaults to sys.platform)."""
    platform = platform or sys.platform
    if platform == "darwin":
        return MacOpener()
    if platform == "win32":
        return WindowsOpener()
    return XdgOpener()


@dataclass
class OpenAllResult:
    """Outcome of opening every link in a folder."""
    attempted: int
    
    @property
    def nothing_to_open(self) -> bool:
        return self.attempted == 0
    
    def summary(self) -> str:
        if self.nothing_to_open:
            return "No links in this folder"
        return f"Opened {self.attempted} link{'' if self.attempted == 1 else 's'}"


class LinkLauncher:
    """Opens single links or whole folders through an injected Opener."""
    
    def __init__(self, opener: Optional[Opener] = None):
        self.opener = opener or get_opener()
    
    def open(self, url: str, app: Optional[SavedApp] = None) -> bool:
        """
        Open a URL, with a specific application if one is saved.
        
        Returns:
            True if the OS accepted the request, False otherwise (failure is logged)
        """
        if app is not None and not self.opener.supports_app_targeting:
            logger.info(f"Opening with '{app.name}' is not supported here, using the default handler")
        try:
            self.opener.open_url(url, app)
            return True
        except OpenError as e:
            logger.error(f"Failed to open {url}: {e}")
            return False
    
    def open_all(self, folder: Folder) -> OpenAllResult:
        """
        Open every link under a folder, in display order.
        
        Individual failures are logged and do not stop the batch; the result
        counts attempts, not successes.
        """
        links = collect_links(folder)
        for link in links:
            self.open(link.url, link.app)
        return OpenAllResult(attempted=len(links))

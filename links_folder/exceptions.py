"""Custom exception classes for the links folder."""


class LinksFolderError(Exception):
    """Base exception for links folder errors."""
    pass


class InvalidInputError(LinksFolderError):
    """Exception raised when user input is rejected before any file I/O."""
    pass


class UnsupportedPlatformError(LinksFolderError):
    """Exception raised when a feature is not available on the host platform."""
    pass


class ActiveTabUnavailableError(LinksFolderError):
    """Exception raised when no supported browser reports an active tab."""
    pass


class NothingToExportError(LinksFolderError):
    """Exception raised when there is no saved links file to export."""
    pass


class OpenError(LinksFolderError):
    """Exception raised when the OS fails to open a URL."""
    pass


class AppleScriptError(LinksFolderError):
    """Exception raised for AppleScript execution errors."""
    pass

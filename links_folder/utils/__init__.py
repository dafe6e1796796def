"""Utility modules for the links folder."""

from .applescript import AppleScriptExecutor

__all__ = ["AppleScriptExecutor"]

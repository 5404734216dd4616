"""Exceptions raised while generating, loading and rendering views."""

from pathlib import Path
from typing import Optional


class MdlRenderError(Exception):
    """Base exception for mdl-render errors."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path
        super().__init__(message)


class ConfigError(MdlRenderError):
    """A configuration file could not be read or parsed."""


class GenerationError(MdlRenderError):
    """The external generation step failed."""

    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr


class ViewReadError(MdlRenderError):
    """A view descriptor file could not be read."""


class ViewParseError(MdlRenderError):
    """A view descriptor is not valid JSON or not a valid view."""


class PageWriteError(MdlRenderError):
    """An HTML page could not be created or written."""


class TemplateRenderError(MdlRenderError):
    """The page template failed to render."""

"""Static pages — one standalone HTML document per rendered view."""

from .renderer import PageRenderer, render
from .schemas import ViewData

__all__ = ["PageRenderer", "ViewData", "render"]

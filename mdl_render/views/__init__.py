"""Rendered views — the JSON descriptors produced by the generation step.

A RenderedView carries one diagram's metadata and Mermaid source. The
loader runs the generator and collects every descriptor keyed by view key.
"""

from .loader import ViewLoader, load_views
from .schemas import RenderedView

__all__ = ["RenderedView", "ViewLoader", "load_views"]

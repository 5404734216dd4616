"""mdl-render - static HTML pages for architecture diagram views.

This package turns generated view descriptors into standalone pages:
- View loading (generation step + JSON descriptors on disk)
- Page rendering (fixed HTML template with Mermaid.js)
"""

__version__ = "0.1.0"

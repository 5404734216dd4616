"""Page renderer — writes one static HTML page per rendered view.

Views come from the ViewLoader; each is bound to the fixed template and
written to <out_dir>/<key>.html. The first failure aborts the run and
pages already written stay on disk.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from jinja2 import BaseLoader, Environment, TemplateError

from mdl_render.exceptions import PageWriteError, TemplateRenderError
from mdl_render.views.generator import Generator
from mdl_render.views.loader import PAGE_SUFFIX, ViewLoader
from mdl_render.views.schemas import RenderedView

from .schemas import ViewData
from .templates import DEFAULT_CSS, DEFAULT_TEMPLATE, LIVERELOAD_URL, MERMAID_URL

logger = logging.getLogger(__name__)


class PageRenderer:
    """Renders rendered views into standalone HTML pages.

    Usage:
        renderer = PageRenderer(mermaid_config='{"theme":"dark"}')
        paths = renderer.write_pages(views, Path("gendesign"))
    """

    def __init__(self, mermaid_config: str = ""):
        """Initialize the renderer.

        Args:
            mermaid_config: Mermaid config JSON text shared by every page
        """
        self.mermaid_config = mermaid_config

        self.env = Environment(
            loader=BaseLoader(),
            autoescape=True,
            keep_trailing_newline=True,
        )
        self.env.globals["livereload_url"] = LIVERELOAD_URL
        self.env.globals["mermaid_url"] = MERMAID_URL
        self.template = self.env.from_string(DEFAULT_TEMPLATE)

    def view_data(self, view: RenderedView) -> ViewData:
        return ViewData.from_view(view, mermaid_config=self.mermaid_config, css=DEFAULT_CSS)

    def render_view(self, view: RenderedView) -> str:
        """Render the HTML page for a single view."""
        try:
            return self.template.render(**self.view_data(view).model_dump())
        except TemplateError as e:
            raise TemplateRenderError(f"Template rendering error for view {view.key}: {e}") from e

    def write_page(self, view: RenderedView, out_dir: Path) -> Path:
        """Create or truncate <out_dir>/<key>.html and write the rendered page."""
        path = out_dir / f"{view.key}{PAGE_SUFFIX}"
        # ValueError covers names the OS cannot represent (embedded NUL)
        try:
            f = open(path, "w", encoding="utf-8")
        except (OSError, ValueError) as e:
            raise PageWriteError(f"Cannot create page {path}: {e}", path) from e

        with f:
            html = self.render_view(view)
            try:
                f.write(html)
            except OSError as e:
                raise PageWriteError(f"Cannot write page {path}: {e}", path) from e

        logger.info(f"Rendered view {view.key} -> {path}")
        return path

    def write_pages(self, views: dict[str, RenderedView], out_dir: Path) -> list[Path]:
        """Write a page for every view, in key order."""
        return [self.write_page(views[key], out_dir) for key in sorted(views)]


def remove_stale_pages(out_dir: Path, keys) -> list[Path]:
    """Delete top-level .html pages whose name matches no current view key."""
    removed = []
    for path in sorted(out_dir.glob(f"*{PAGE_SUFFIX}")):
        if path.is_file() and path.stem not in keys:
            try:
                path.unlink()
            except OSError as e:
                raise PageWriteError(f"Cannot remove stale page {path}: {e}", path) from e
            logger.debug(f"Removed stale page: {path}")
            removed.append(path)
    if removed:
        logger.info(f"Removed {len(removed)} stale pages from {out_dir}")
    return removed


def render(
    package: str,
    config: str,
    out_dir: Union[str, Path],
    debug: bool = False,
    generator: Optional[Generator] = None,
    clean_stale: bool = False,
) -> list[Path]:
    """Generate the views for a package and render a static page for each.

    Args:
        package: Package identifier handed to the generation step
        config: Mermaid config JSON text ("" for none)
        out_dir: Directory the generator writes to and pages are written into
        debug: Forwarded to the generation step
        generator: Generation callable (default: CommandGenerator)
        clean_stale: Remove pages left over from views that no longer exist

    Returns:
        Paths of the pages written, in key order
    """
    out_dir = Path(out_dir)
    views = ViewLoader(out_dir, generator=generator).load(package, debug=debug)

    if clean_stale:
        remove_stale_pages(out_dir, set(views))

    paths = PageRenderer(mermaid_config=config).write_pages(views, out_dir)
    logger.info(f"Rendered {len(paths)} pages into {out_dir}")
    return paths

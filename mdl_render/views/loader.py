"""View loader — runs the generation step and reads every descriptor.

Every regular file under the output directory is parsed as a
RenderedView, except pages rendered by an earlier run. Entries are walked
in lexical order, depth first, so key collisions resolve the same way on
every run (the later file wins).
"""

import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from mdl_render.exceptions import GenerationError, ViewParseError, ViewReadError

from .generator import CommandGenerator, Generator
from .schemas import RenderedView

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".html"
PAGE_PREFIX = b"<!DOCTYPE html>"


class ViewLoader:
    """Loads rendered views produced by a generator into a dict keyed by view key."""

    def __init__(self, out_dir: Union[str, Path], generator: Optional[Generator] = None):
        self.out_dir = Path(out_dir)
        self.generator = generator or CommandGenerator()

    def generate(self, package: str, debug: bool = False) -> None:
        """Run the generation step, normalizing failures to GenerationError."""
        try:
            self.generator(package, self.out_dir, debug)
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(f"Generation for {package} failed: {e}") from e

    def load(self, package: str, debug: bool = False) -> dict[str, RenderedView]:
        """Generate views for a package and load every descriptor.

        Raises:
            GenerationError: If the generation step fails
            ViewReadError: On the first file that cannot be read
            ViewParseError: On the first file that is not a valid view
        """
        self.generate(package, debug)

        if not self.out_dir.is_dir():
            raise ViewReadError(f"Output directory not found: {self.out_dir}", self.out_dir)

        views: dict[str, RenderedView] = {}
        for path in self._walk(self.out_dir):
            data = self.read_file(path)
            # Pages rendered by an earlier run share the directory
            if is_rendered_page(path, data):
                logger.debug(f"Skipping rendered page: {path}")
                continue
            view = self.parse_view(path, data)
            if view.key in views:
                logger.debug(f"View {view.key} from {path} overrides an earlier file")
            views[view.key] = view
            logger.debug(f"Loaded view: {view.key}")

        logger.info(f"Loaded {len(views)} views from {self.out_dir}")
        return views

    def _walk(self, directory: Path):
        """Yield regular files under directory in lexical order, depth first."""
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            raise ViewReadError(f"Cannot walk {directory}: {e}", directory) from e

        for path in entries:
            if path.is_dir():
                yield from self._walk(path)
            else:
                yield path

    @staticmethod
    def read_file(path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as e:
            raise ViewReadError(f"Cannot read view file {path}: {e}", path) from e

    @staticmethod
    def parse_view(path: Path, data: bytes) -> RenderedView:
        try:
            return RenderedView.model_validate_json(data)
        except ValidationError as e:
            raise ViewParseError(f"Invalid view file {path}: {e}", path) from e

    def read_view(self, path: Path) -> RenderedView:
        """Read and validate a single view descriptor."""
        return self.parse_view(path, self.read_file(path))


def is_rendered_page(path: Path, data: bytes) -> bool:
    """True for an HTML page written by the renderer, not a view descriptor."""
    return path.suffix == PAGE_SUFFIX and data.lstrip().startswith(PAGE_PREFIX)


def load_views(
    package: str,
    out_dir: Union[str, Path],
    debug: bool = False,
    generator: Optional[Generator] = None,
) -> dict[str, RenderedView]:
    """Generate the views for a package and return them indexed by view key."""
    return ViewLoader(out_dir, generator=generator).load(package, debug=debug)

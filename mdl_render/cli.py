"""Command-line entry point: render static pages for a design package.

Usage:
    mdl-render example.com/design
    mdl-render example.com/design --out gendesign --config mermaid.yaml
    mdl-render example.com/design --clean --debug
"""

import argparse
import logging
import sys
from typing import Optional

from mdl_render import __version__, config
from mdl_render.exceptions import MdlRenderError
from mdl_render.pages.renderer import render
from mdl_render.views.generator import CommandGenerator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdl-render",
        description="Generate architecture views for a package and render them as static HTML pages.",
    )
    parser.add_argument("package", help="Package identifier passed to the generation step")
    parser.add_argument(
        "--out", default=config.OUTPUT_DIR,
        help=f"Output directory for view files and pages (default: {config.OUTPUT_DIR})",
    )
    parser.add_argument(
        "--config", default=config.MERMAID_CONFIG_PATH or None,
        help="Mermaid config file, JSON or YAML (default: $MDL_MERMAID_CONFIG)",
    )
    parser.add_argument(
        "--gen-command", default=None,
        help="Generation command template with {package} and {out} (default: $MDL_GEN_COMMAND)",
    )
    parser.add_argument(
        "--clean", action="store_true",
        help="Remove pages for views that no longer exist",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging, debug generation")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        mermaid_config = config.load_mermaid_config(args.config)
        paths = render(
            args.package,
            mermaid_config,
            args.out,
            debug=args.debug,
            generator=CommandGenerator(args.gen_command),
            clean_stale=args.clean,
        )
    except MdlRenderError as e:
        logger.error(e.message)
        return 1

    print(f"Rendered {len(paths)} pages into {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

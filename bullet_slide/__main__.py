"""Command-line entry point: ``python -m bullet_slide [description.json]``."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import RendererSettings
from .exceptions import SlideDescriptionError
from .pptx_renderer import SlideDeckRenderer, WriteFailed, WriteResult
from .slide_document import SlideDescriptionStore, load_default_description

LOGGER = logging.getLogger("bullet_slide")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bullet_slide",
        description="Render a JSON slide description into a PPTX file.",
    )
    parser.add_argument(
        "description",
        nargs="?",
        type=Path,
        help="slide description JSON (defaults to the bundled sample slide)",
    )
    parser.add_argument("-o", "--output", type=Path, help="output .pptx path")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def report(result: WriteResult) -> int:
    """Log the outcome of a write and return the process exit status."""

    if isinstance(result, WriteFailed):
        LOGGER.error("PowerPoint file could not be written to %s: %s", result.path, result.error)
        return 1
    LOGGER.info("PowerPoint file generated: %s", result.path)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    settings = RendererSettings.from_env()
    try:
        if args.description is None:
            description = load_default_description()
        else:
            description = SlideDescriptionStore(args.description).load()
    except SlideDescriptionError as exc:
        LOGGER.error("%s", exc)
        return 1

    renderer = SlideDeckRenderer(settings)
    return report(renderer.write_file(description, args.output))


if __name__ == "__main__":  # pragma: no cover - manual execution utility
    raise SystemExit(main())

"""Utilities for reading and writing slide description JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from .exceptions import SlideDescriptionError
from .slide_models import SlideDescription

DEFAULT_DESCRIPTION_PATH = Path(__file__).parent / "data" / "bullet_slide.json"


class SlideDescriptionStore:
    """Persist `SlideDescription` instances to disk as JSON files."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    # ------------------------------------------------------------------
    # I/O helpers
    # ------------------------------------------------------------------
    def load(self) -> SlideDescription:
        if not self.path.exists():
            raise SlideDescriptionError(f"Slide description not found at {self.path}")
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise SlideDescriptionError(
                f"Could not read slide description {self.path}", exc
            ) from exc
        return parse_description(data)

    def save(self, description: SlideDescription) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(description.to_dict(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


def parse_description(data: object) -> SlideDescription:
    if not isinstance(data, dict):
        raise SlideDescriptionError("Slide description must be a JSON object")
    return SlideDescription.from_dict(data)


def load_default_description() -> SlideDescription:
    """Return the bundled sample slide."""

    return SlideDescriptionStore(DEFAULT_DESCRIPTION_PATH).load()

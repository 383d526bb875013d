"""Runtime settings for rendering slide descriptions."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_OUTPUT_FILE = "箇条書きと途中で赤_再現.pptx"
DEFAULT_FONT_FACE = "Arial"

# 16:9 widescreen, the box coordinates of the sample slide assume this size.
DEFAULT_SLIDE_WIDTH_IN = 13.333
DEFAULT_SLIDE_HEIGHT_IN = 7.5


@dataclass(slots=True)
class RendererSettings:
    """Settings shared by the renderer, the CLI and the Streamlit UI."""

    output_path: Path = Path(DEFAULT_OUTPUT_FILE)
    default_font_face: str = DEFAULT_FONT_FACE
    slide_width_in: float = DEFAULT_SLIDE_WIDTH_IN
    slide_height_in: float = DEFAULT_SLIDE_HEIGHT_IN

    @classmethod
    def from_env(cls) -> "RendererSettings":
        """Build settings from ``BULLET_SLIDE_*`` variables and a ``.env`` in the working directory."""

        load_dotenv(find_dotenv(usecwd=True))
        return cls(
            output_path=Path(os.getenv("BULLET_SLIDE_OUTPUT") or DEFAULT_OUTPUT_FILE),
            default_font_face=os.getenv("BULLET_SLIDE_DEFAULT_FONT") or DEFAULT_FONT_FACE,
            slide_width_in=_float_env("BULLET_SLIDE_WIDTH_IN", DEFAULT_SLIDE_WIDTH_IN),
            slide_height_in=_float_env("BULLET_SLIDE_HEIGHT_IN", DEFAULT_SLIDE_HEIGHT_IN),
        )


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default

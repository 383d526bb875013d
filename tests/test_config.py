import os
from pathlib import Path

import pytest

from bullet_slide.config import (
    DEFAULT_FONT_FACE,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_SLIDE_WIDTH_IN,
    RendererSettings,
)

ENV_NAMES = (
    "BULLET_SLIDE_OUTPUT",
    "BULLET_SLIDE_DEFAULT_FONT",
    "BULLET_SLIDE_WIDTH_IN",
    "BULLET_SLIDE_HEIGHT_IN",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment():
    settings = RendererSettings.from_env()

    assert settings.output_path == Path(DEFAULT_OUTPUT_FILE)
    assert settings.default_font_face == DEFAULT_FONT_FACE
    assert settings.slide_width_in == DEFAULT_SLIDE_WIDTH_IN


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BULLET_SLIDE_OUTPUT", "deck/out.pptx")
    monkeypatch.setenv("BULLET_SLIDE_DEFAULT_FONT", "Meiryo")
    monkeypatch.setenv("BULLET_SLIDE_WIDTH_IN", "10")
    monkeypatch.setenv("BULLET_SLIDE_HEIGHT_IN", "5.625")

    settings = RendererSettings.from_env()

    assert settings.output_path == Path("deck/out.pptx")
    assert settings.default_font_face == "Meiryo"
    assert settings.slide_width_in == 10.0
    assert settings.slide_height_in == 5.625


def test_invalid_dimension_falls_back(monkeypatch):
    monkeypatch.setenv("BULLET_SLIDE_WIDTH_IN", "wide")

    assert RendererSettings.from_env().slide_width_in == DEFAULT_SLIDE_WIDTH_IN


def test_dotenv_in_working_directory_is_read(monkeypatch, tmp_path):
    monkeypatch.setattr(os, "environ", dict(os.environ))
    (tmp_path / ".env").write_text("BULLET_SLIDE_DEFAULT_FONT=Meiryo\n", encoding="utf-8")

    assert RendererSettings.from_env().default_font_face == "Meiryo"

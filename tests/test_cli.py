import logging

import pytest

pytest.importorskip("pptx")

from bullet_slide import __main__ as cli
from bullet_slide.pptx_renderer import WriteFailed, WriteSucceeded
from bullet_slide.slide_document import SlideDescriptionStore, load_default_description


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in (
        "BULLET_SLIDE_OUTPUT",
        "BULLET_SLIDE_DEFAULT_FONT",
        "BULLET_SLIDE_WIDTH_IN",
        "BULLET_SLIDE_HEIGHT_IN",
    ):
        monkeypatch.delenv(name, raising=False)


def test_main_writes_bundled_slide(tmp_path, caplog):
    output = tmp_path / "out.pptx"

    with caplog.at_level(logging.INFO, logger="bullet_slide"):
        exit_code = cli.main(["-o", str(output)])

    assert exit_code == 0
    assert output.exists()
    assert "PowerPoint file generated" in caplog.text


def test_main_defaults_to_configured_output(tmp_path, monkeypatch):
    monkeypatch.setenv("BULLET_SLIDE_OUTPUT", str(tmp_path / "from-env.pptx"))

    assert cli.main([]) == 0
    assert (tmp_path / "from-env.pptx").exists()


def test_main_reads_description_file(tmp_path):
    source = tmp_path / "slide.json"
    SlideDescriptionStore(source).save(load_default_description())
    output = tmp_path / "custom.pptx"

    assert cli.main([str(source), "--output", str(output)]) == 0
    assert output.exists()


def test_main_reports_unreadable_description(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="bullet_slide"):
        exit_code = cli.main([str(tmp_path / "nope.json")])

    assert exit_code == 1
    assert "not found" in caplog.text


def test_main_reports_write_failure(tmp_path, caplog):
    output = tmp_path / "no-such-dir" / "out.pptx"

    with caplog.at_level(logging.ERROR, logger="bullet_slide"):
        exit_code = cli.main(["-o", str(output)])

    assert exit_code == 1
    assert "could not be written" in caplog.text


def test_report_maps_results_to_exit_codes(tmp_path):
    path = tmp_path / "x.pptx"

    assert cli.report(WriteSucceeded(path)) == 0
    assert cli.report(WriteFailed(path, OSError("disk full"))) == 1

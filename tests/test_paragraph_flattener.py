import pytest

from bullet_slide.paragraph_flattener import (
    SHAPE_ONLY,
    flatten_element,
    flatten_paragraph,
    flatten_paragraphs,
)
from bullet_slide.slide_models import Bullet, Paragraph, Run, SlideElement


def _run(text, *, is_break=False, font_face="Rakuten Sans JP", color="4A5568"):
    return Run(
        text=text,
        font_size=14,
        color=color,
        bold=False,
        italic=False,
        font_face=font_face,
        is_break=is_break,
    )


def _element(*paragraphs):
    return SlideElement(element_id=1, x=0.5, y=0.4, w=6.0, h=2.0, paragraphs=tuple(paragraphs))


BULLET = Bullet(kind="char", char="•", font="Arial")


def test_single_run_without_bullet():
    element = _element(Paragraph(text="Hello", runs=(_run("Hello"),)))

    fragments = flatten_element(element)

    assert len(fragments) == 1
    fragment = fragments[0]
    assert fragment.text == "Hello"
    assert fragment.options.bullet is False
    assert fragment.options.indent_level == 0
    assert fragment.options.break_line is False


def test_bulleted_paragraph_marks_only_first_run():
    paragraph = Paragraph(
        text="ABC", level=1, bullet=BULLET, runs=(_run("A"), _run("B"), _run("C"))
    )

    fragments = flatten_element(_element(paragraph))

    assert [fragment.text for fragment in fragments] == ["A", "B", "C"]
    assert fragments[0].options.bullet is True
    assert fragments[0].options.indent_level == 1
    assert fragments[0].options.bullet_char == "•"
    assert fragments[0].options.bullet_font == "Arial"
    for continuation in fragments[1:]:
        assert continuation.options.bullet is False
        assert continuation.options.indent_level is None
        assert not continuation.options.starts_paragraph


@pytest.mark.parametrize("bullet", [None, BULLET])
def test_empty_run_list_is_a_blank_line(bullet):
    paragraph = Paragraph(text="", level=2, bullet=bullet, runs=())

    fragments = flatten_paragraph(paragraph)

    assert len(fragments) == 1
    assert fragments[0].text == ""
    assert fragments[0].options.break_line is True
    assert fragments[0].options.bullet is False
    assert fragments[0].options.indent_level == 0


def test_element_without_paragraphs_is_shape_only():
    result = flatten_element(_element())

    assert result is SHAPE_ONLY
    assert result != ()


@pytest.mark.parametrize("run_count", [1, 2, 5])
def test_paragraph_without_bullet_never_emits_bullets(run_count):
    runs = tuple(_run(f"run {index}") for index in range(run_count))
    fragments = flatten_paragraph(Paragraph(level=3, runs=runs))

    assert len(fragments) == run_count
    assert not any(fragment.options.bullet for fragment in fragments)
    assert fragments[0].options.indent_level == 0


@pytest.mark.parametrize("break_position", [0, 1, 2])
def test_forced_break_follows_each_runs_own_flag(break_position):
    runs = tuple(
        _run(f"r{index}", is_break=(index == break_position)) for index in range(3)
    )

    fragments = flatten_paragraph(Paragraph(bullet=BULLET, runs=runs))

    assert [fragment.options.break_line for fragment in fragments] == [
        index == break_position for index in range(3)
    ]


def test_flattening_preserves_paragraph_order():
    first = Paragraph(bullet=BULLET, runs=(_run("first"), _run("tail")))
    blank = Paragraph(runs=())
    second = Paragraph(runs=(_run("second", is_break=True),))

    combined = flatten_paragraphs([first, blank, second])

    assert combined == (
        flatten_paragraph(first) + flatten_paragraph(blank) + flatten_paragraph(second)
    )
    assert [fragment.text for fragment in combined] == ["first", "tail", "", "second"]


def test_empty_font_face_falls_back_to_default():
    paragraph = Paragraph(runs=(_run("x", font_face=""), _run("y", font_face="Meiryo")))

    fragments = flatten_paragraph(paragraph, default_face="Helvetica")

    assert fragments[0].options.font_face == "Helvetica"
    assert fragments[1].options.font_face == "Meiryo"


def test_run_styling_is_copied_to_options():
    run = Run(
        text="11/3-7:",
        font_size=14,
        color="BF0000",
        bold=True,
        italic=True,
        font_face="Rakuten Sans JP",
        underline="sng",
    )

    (fragment,) = flatten_paragraph(Paragraph(runs=(run,)))

    assert fragment.options.font_size == 14
    assert fragment.options.color == "BF0000"
    assert fragment.options.bold is True
    assert fragment.options.italic is True
    assert fragment.options.underline is True


def test_paragraph_without_run_key_uses_element_defaults():
    element = SlideElement(
        element_id=3,
        x=0,
        y=0,
        w=1,
        h=1,
        font_size=18,
        color="2D3748",
        bold=True,
        font_face="",
        paragraphs=(Paragraph(text="Plain text", level=1, bullet=BULLET, runs=None),),
    )

    (fragment,) = flatten_element(element)

    assert fragment.text == "Plain text"
    assert fragment.options.font_size == 18
    assert fragment.options.color == "2D3748"
    assert fragment.options.bold is True
    assert fragment.options.font_face == "Arial"
    assert fragment.options.bullet is True
    assert fragment.options.indent_level == 1


def test_flattening_does_not_modify_input():
    paragraph = Paragraph(text="A", bullet=BULLET, runs=(_run("A"),))
    element = _element(paragraph)
    before = element.to_dict()

    flatten_element(element)

    assert element.to_dict() == before

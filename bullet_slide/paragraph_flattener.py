"""Flatten paragraphs and runs into renderable text fragments.

Each source paragraph contributes one or more fragments. Only the first
fragment of a paragraph carries bullet and indent information; later runs
render as continuations of the same line. A paragraph with an empty run list
is a blank line and never carries a bullet, even when it declares one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from .config import DEFAULT_FONT_FACE
from .slide_models import Paragraph, Run, SlideElement


class _ShapeOnly:
    """Marker for elements that are drawn as plain shapes without text."""

    _instance: Optional["_ShapeOnly"] = None

    def __new__(cls) -> "_ShapeOnly":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SHAPE_ONLY"

    def __bool__(self) -> bool:
        return False


SHAPE_ONLY = _ShapeOnly()


@dataclass(frozen=True, slots=True)
class FragmentOptions:
    """Styling and layout hints for one fragment.

    ``indent_level`` is ``None`` for continuation runs; any other value marks
    the fragment as the head of a paragraph.
    """

    font_size: Optional[float] = None
    color: str = ""
    bold: bool = False
    italic: bool = False
    font_face: str = DEFAULT_FONT_FACE
    underline: bool = False
    bullet: bool = False
    bullet_char: Optional[str] = None
    bullet_font: Optional[str] = None
    indent_level: Optional[int] = None
    break_line: bool = False

    @property
    def starts_paragraph(self) -> bool:
        return self.indent_level is not None


@dataclass(frozen=True, slots=True)
class RenderableFragment:
    text: str
    options: FragmentOptions


Fragments = Tuple[RenderableFragment, ...]
FlattenResult = Union[Fragments, _ShapeOnly]

BLANK_LINE = RenderableFragment(
    text="",
    options=FragmentOptions(bullet=False, indent_level=0, break_line=True),
)


def flatten_paragraph(
    paragraph: Paragraph,
    element: Optional[SlideElement] = None,
    *,
    default_face: str = DEFAULT_FONT_FACE,
) -> Fragments:
    """Return the fragments for a single paragraph.

    ``element`` supplies the default styling used when the paragraph has no
    run list at all.
    """

    if paragraph.runs is None:
        return (_plain_paragraph_fragment(paragraph, element, default_face),)
    if not paragraph.runs:
        return (BLANK_LINE,)
    return tuple(
        _run_fragment(run, paragraph, index, default_face)
        for index, run in enumerate(paragraph.runs)
    )


def flatten_paragraphs(
    paragraphs: Iterable[Paragraph],
    element: Optional[SlideElement] = None,
    *,
    default_face: str = DEFAULT_FONT_FACE,
) -> Fragments:
    fragments = []
    for paragraph in paragraphs:
        fragments.extend(flatten_paragraph(paragraph, element, default_face=default_face))
    return tuple(fragments)


def flatten_element(
    element: SlideElement, *, default_face: str = DEFAULT_FONT_FACE
) -> FlattenResult:
    """Return the element's fragments, or ``SHAPE_ONLY`` when it has no text."""

    if not element.paragraphs:
        return SHAPE_ONLY
    return flatten_paragraphs(element.paragraphs, element, default_face=default_face)


def _run_fragment(run: Run, paragraph: Paragraph, index: int, default_face: str) -> RenderableFragment:
    bullet = False
    bullet_char = None
    bullet_font = None
    indent_level = None
    if index == 0:
        if paragraph.bullet is not None:
            bullet = True
            bullet_char = paragraph.bullet.char
            bullet_font = paragraph.bullet.font or None
            indent_level = paragraph.level
        else:
            indent_level = 0

    return RenderableFragment(
        text=run.text,
        options=FragmentOptions(
            font_size=run.font_size,
            color=run.color,
            bold=run.bold,
            italic=run.italic,
            font_face=run.font_face or default_face,
            underline=_is_underlined(run.underline),
            bullet=bullet,
            bullet_char=bullet_char,
            bullet_font=bullet_font,
            indent_level=indent_level,
            break_line=run.is_break,
        ),
    )


def _plain_paragraph_fragment(
    paragraph: Paragraph, element: Optional[SlideElement], default_face: str
) -> RenderableFragment:
    has_bullet = paragraph.bullet is not None
    return RenderableFragment(
        text=paragraph.text,
        options=FragmentOptions(
            font_size=element.font_size if element else None,
            color=element.color if element else "",
            bold=element.bold if element else False,
            italic=element.italic if element else False,
            font_face=(element.font_face if element else "") or default_face,
            bullet=has_bullet,
            bullet_char=paragraph.bullet.char if has_bullet else None,
            bullet_font=(paragraph.bullet.font or None) if has_bullet else None,
            indent_level=paragraph.level,
        ),
    )


def _is_underlined(style: str) -> bool:
    return bool(style) and style.lower() != "none"

"""Utilities to render :class:`SlideDescription` objects into PPTX files."""

from __future__ import annotations

import io
import logging
import re
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.shapes import MSO_SHAPE
from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
from pptx.oxml.xmlchemy import OxmlElement
from pptx.util import Inches, Pt

from .config import RendererSettings
from .exceptions import SlideRenderError
from .paragraph_flattener import (
    SHAPE_ONLY,
    FragmentOptions,
    RenderableFragment,
    flatten_element,
)
from .slide_models import SlideDescription, SlideElement, SlideNumberSpec

LOGGER = logging.getLogger(__name__)

BLANK_LAYOUT_INDEX = 6
BULLET_INDENT = Pt(27)
MAX_OUTLINE_LEVEL = 8
FALLBACK_TEXT_COLOR = "000000"
SLIDE_NUMBER_FIELD_ID = "{B6F15528-21DE-4FAA-801E-634DDDAF4B2B}"

_HEX_COLOR = re.compile(r"^[0-9A-Fa-f]{6}$")

ALIGNMENTS = {
    "l": PP_ALIGN.LEFT,
    "left": PP_ALIGN.LEFT,
    "ctr": PP_ALIGN.CENTER,
    "center": PP_ALIGN.CENTER,
    "r": PP_ALIGN.RIGHT,
    "right": PP_ALIGN.RIGHT,
    "just": PP_ALIGN.JUSTIFY,
    "justify": PP_ALIGN.JUSTIFY,
}


@dataclass(frozen=True, slots=True)
class WriteSucceeded:
    path: Path

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class WriteFailed:
    path: Path
    error: Exception

    @property
    def ok(self) -> bool:
        return False


WriteResult = Union[WriteSucceeded, WriteFailed]


class SlideDeckRenderer:
    """Render a slide description into a single-slide PPTX deck."""

    def __init__(self, settings: Optional[RendererSettings] = None) -> None:
        self.settings = settings or RendererSettings()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def build_presentation(self, description: SlideDescription):
        """Return a python-pptx ``Presentation`` holding ``description``."""

        presentation = Presentation()
        template = description.template
        text_color = _hex_color(template.default_text_color) or FALLBACK_TEXT_COLOR
        background = _hex_color(template.background)
        try:
            presentation.slide_width = Inches(self.settings.slide_width_in)
            presentation.slide_height = Inches(self.settings.slide_height_in)
            slide = presentation.slides.add_slide(
                presentation.slide_layouts[BLANK_LAYOUT_INDEX]
            )
            if background:
                slide.background.fill.solid()
                slide.background.fill.fore_color.rgb = RGBColor.from_string(background)
            if template.slide_number is not None:
                self._add_slide_number(slide, template.slide_number)
            for element in description.elements:
                self._draw_element(slide, element, text_color)
        except (ValueError, TypeError, KeyError, OverflowError) as exc:
            raise SlideRenderError(
                f"Failed to draw slide '{description.slide}'", exc
            ) from exc
        return presentation

    def render_description(self, description: SlideDescription) -> io.BytesIO:
        """Return a PPTX stream that represents ``description``."""

        buffer = io.BytesIO()
        self.build_presentation(description).save(buffer)
        buffer.seek(0)
        return buffer

    def write_file(
        self, description: SlideDescription, path: Optional[Path] = None
    ) -> WriteResult:
        """Write the deck to ``path`` and report the outcome as a value."""

        target = Path(path or self.settings.output_path)
        try:
            presentation = self.build_presentation(description)
            presentation.save(str(target))
        except (OSError, SlideRenderError) as exc:
            return WriteFailed(path=target, error=exc)
        return WriteSucceeded(path=target)

    def render_preview_image(
        self,
        description: SlideDescription,
        *,
        pptx_bytes: Optional[bytes] = None,
    ) -> Optional[bytes]:
        """Generate a PNG preview if LibreOffice is available."""

        soffice_path = _locate_soffice()
        if soffice_path is None:
            return None

        try:
            payload = pptx_bytes or self.render_description(description).getvalue()
            with tempfile.TemporaryDirectory() as tmpdir:
                pptx_path = Path(tmpdir) / "preview.pptx"
                pptx_path.write_bytes(payload)
                subprocess.run(
                    [
                        soffice_path,
                        "--headless",
                        "--convert-to",
                        "png",
                        "--outdir",
                        tmpdir,
                        str(pptx_path),
                    ],
                    check=True,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE,
                    timeout=60,
                )
                png_files = sorted(Path(tmpdir).glob("*.png"))
                if not png_files:
                    return None
                return png_files[0].read_bytes()
        except (OSError, subprocess.SubprocessError, SlideRenderError) as exc:
            LOGGER.info("Slide preview could not be generated: %s", exc)
            return None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _draw_element(self, slide, element: SlideElement, text_color: str) -> None:
        shape = slide.shapes.add_shape(
            MSO_SHAPE.RECTANGLE,
            Inches(element.x),
            Inches(element.y),
            Inches(element.w),
            Inches(element.h),
        )
        shape.shadow.inherit = False

        fill_color = _hex_color(element.fill.color) if element.fill else None
        if fill_color:
            shape.fill.solid()
            shape.fill.fore_color.rgb = RGBColor.from_string(fill_color)
        else:
            shape.fill.background()

        line_color = _hex_color(element.line.color) if element.line else None
        if line_color:
            shape.line.color.rgb = RGBColor.from_string(line_color)
            shape.line.width = Pt(element.line.pt)
        else:
            shape.line.fill.background()

        fragments = flatten_element(
            element, default_face=self.settings.default_font_face
        )
        if fragments is SHAPE_ONLY:
            LOGGER.debug("Element %s drawn as plain shape", element.element_id)
            return

        text_frame = shape.text_frame
        text_frame.word_wrap = True
        text_frame.vertical_anchor = MSO_ANCHOR.TOP
        alignment = ALIGNMENTS.get(element.align.lower())
        line_size = None
        for index, line in enumerate(group_lines(fragments)):
            paragraph = text_frame.paragraphs[0] if index == 0 else text_frame.add_paragraph()
            if alignment is not None:
                paragraph.alignment = alignment
            head = line[0].options
            if head.starts_paragraph:
                _apply_bullet(paragraph, head)
            for fragment in line:
                _add_fragment_runs(paragraph, fragment, text_color)
            line_size = next(
                (fragment.options.font_size for fragment in line if fragment.options.font_size),
                line_size,
            )
            if not paragraph.runs and line_size:
                # blank rows keep the height of the text around them
                paragraph._p.get_or_add_endParaRPr().set("sz", str(int(line_size * 100)))

    def _add_slide_number(self, slide, spec: SlideNumberSpec) -> None:
        textbox = slide.shapes.add_textbox(
            Inches(spec.x), Inches(spec.y), Inches(spec.w), Inches(spec.h)
        )
        paragraph = textbox.text_frame.paragraphs[0]
        alignment = ALIGNMENTS.get(spec.align.lower())
        if alignment is not None:
            paragraph.alignment = alignment

        run = paragraph.add_run()
        _apply_font(
            run.font,
            FragmentOptions(
                font_size=spec.font_size,
                color=spec.color,
                bold=spec.bold,
                font_face=spec.font or self.settings.default_font_face,
            ),
            FALLBACK_TEXT_COLOR,
        )
        # Swap the plain run for a slidenum field so viewers fill in the number.
        r = run._r
        field = OxmlElement("a:fld")
        field.set("id", SLIDE_NUMBER_FIELD_ID)
        field.set("type", "slidenum")
        field.append(r.get_or_add_rPr())
        text = OxmlElement("a:t")
        text.text = "1"
        field.append(text)
        r.addprevious(field)
        paragraph._p.remove(r)


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------

def group_lines(fragments: Sequence[RenderableFragment]) -> List[List[RenderableFragment]]:
    """Split fragments into text-frame paragraphs.

    A paragraph head opens a new paragraph and a forced break closes the
    current one.
    """

    lines: List[List[RenderableFragment]] = []
    current: List[RenderableFragment] = []
    for fragment in fragments:
        if fragment.options.starts_paragraph and current:
            lines.append(current)
            current = []
        current.append(fragment)
        if fragment.options.break_line:
            lines.append(current)
            current = []
    if current:
        lines.append(current)
    return lines


def _apply_bullet(paragraph, options: FragmentOptions) -> None:
    level = min(options.indent_level or 0, MAX_OUTLINE_LEVEL)
    paragraph.level = level
    pPr = paragraph._p.get_or_add_pPr()
    if not options.bullet:
        pPr.append(OxmlElement("a:buNone"))
        return

    pPr.set("marL", str(int(BULLET_INDENT) * (level + 1)))
    pPr.set("indent", str(-int(BULLET_INDENT)))
    bullet_font = OxmlElement("a:buFont")
    bullet_font.set("typeface", options.bullet_font or options.font_face)
    bullet_char = OxmlElement("a:buChar")
    bullet_char.set("char", options.bullet_char or "•")
    pPr.append(bullet_font)
    pPr.append(bullet_char)


def _add_fragment_runs(paragraph, fragment: RenderableFragment, text_color: str) -> None:
    text = fragment.text
    if fragment.options.break_line:
        # the paragraph ends here anyway
        text = text.rstrip("\r\n")
    for index, part in enumerate(text.replace("\r\n", "\n").split("\n")):
        if index > 0:
            paragraph.add_line_break()
        if not part:
            continue
        run = paragraph.add_run()
        run.text = part
        _apply_font(run.font, fragment.options, text_color)


def _apply_font(font, options: FragmentOptions, text_color: str) -> None:
    if options.font_size:
        font.size = Pt(options.font_size)
    font.bold = options.bold
    font.italic = options.italic
    if options.underline:
        font.underline = True
    if options.font_face:
        font.name = options.font_face
    font.color.rgb = RGBColor.from_string(_hex_color(options.color) or text_color)


def _hex_color(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    value = value.strip().lstrip("#")
    return value.upper() if _HEX_COLOR.match(value) else None


def _locate_soffice() -> Optional[str]:
    candidates = [
        "soffice",
        "/Applications/LibreOffice.app/Contents/MacOS/soffice",
        "/usr/bin/soffice",
    ]
    for candidate in candidates:
        try:
            subprocess.run(
                [candidate, "--version"],
                check=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
            return candidate
        except (OSError, subprocess.SubprocessError):
            continue
    return None

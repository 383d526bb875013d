"""Data models describing a single slide: boxes, paragraphs and styled runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def _level(value: Any) -> int:
    return max(_int(value), 0)


@dataclass(frozen=True, slots=True)
class Run:
    """A contiguous span of styled text inside a paragraph."""

    text: str = ""
    font_size: Optional[float] = None
    color: str = ""
    bold: bool = False
    italic: bool = False
    font_face: str = ""
    underline: str = "none"
    baseline: int = 0
    is_break: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Run":
        return cls(
            text=data.get("text") or "",
            font_size=_optional_float(data.get("fontSize")),
            color=data.get("color") or "",
            bold=bool(data.get("bold", False)),
            italic=bool(data.get("italic", False)),
            font_face=data.get("fontFace") or "",
            underline=data.get("underline") or "none",
            baseline=_int(data.get("baseline")),
            is_break=bool(data.get("isBreak", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "fontSize": self.font_size,
            "color": self.color,
            "bold": self.bold,
            "italic": self.italic,
            "fontFace": self.font_face,
            "underline": self.underline,
            "baseline": self.baseline,
            "isBreak": self.is_break,
        }


@dataclass(frozen=True, slots=True)
class Bullet:
    """List marker attached to a paragraph."""

    kind: str = "char"
    char: str = "•"
    font: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bullet":
        return cls(
            kind=data.get("type") or "char",
            char=data.get("char") or "•",
            font=data.get("font") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "char": self.char, "font": self.font}


def _bullet(value: Any) -> Optional[Bullet]:
    if isinstance(value, dict):
        return Bullet.from_dict(value)
    if isinstance(value, str) and value.strip():
        return Bullet(char=value.strip())
    return Bullet() if value else None


@dataclass(frozen=True, slots=True)
class Paragraph:
    """A logical line group made of runs.

    ``runs`` is ``None`` when the source omitted the key entirely, which is
    not the same as an explicit empty list (a blank line).
    """

    text: str = ""
    level: int = 0
    bullet: Optional[Bullet] = None
    runs: Optional[Tuple[Run, ...]] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Paragraph":
        bullet_data = data.get("bullet")
        runs_data = data.get("runs")
        return cls(
            text=data.get("text") or "",
            level=_level(data.get("level")),
            bullet=_bullet(bullet_data),
            runs=None if runs_data is None else tuple(Run.from_dict(item) for item in runs_data),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "text": self.text,
            "level": self.level,
            "bullet": self.bullet.to_dict() if self.bullet else None,
        }
        if self.runs is not None:
            payload["runs"] = [run.to_dict() for run in self.runs]
        return payload


@dataclass(frozen=True, slots=True)
class Fill:
    color: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Fill":
        return cls(color=data.get("color") or "")

    def to_dict(self) -> Dict[str, Any]:
        return {"color": self.color}


@dataclass(frozen=True, slots=True)
class Border:
    color: str
    pt: float = 1.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Border":
        pt = _optional_float(data.get("pt"))
        return cls(color=data.get("color") or "", pt=1.0 if pt is None else pt)

    def to_dict(self) -> Dict[str, Any]:
        return {"color": self.color, "pt": self.pt}


@dataclass(frozen=True, slots=True)
class SlideElement:
    """A positioned box on the slide, optionally carrying paragraphs."""

    element_id: int
    x: float
    y: float
    w: float
    h: float
    text: str = ""
    font_size: Optional[float] = None
    color: str = ""
    bold: bool = False
    italic: bool = False
    font_face: str = ""
    align: str = "left"
    shape_type: str = "rect"
    fill: Optional[Fill] = None
    line: Optional[Border] = None
    paragraphs: Tuple[Paragraph, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SlideElement":
        fill = data.get("fill")
        line = data.get("line")
        return cls(
            element_id=_int(data.get("id")),
            x=_optional_float(data.get("x")) or 0.0,
            y=_optional_float(data.get("y")) or 0.0,
            w=_optional_float(data.get("w")) or 0.0,
            h=_optional_float(data.get("h")) or 0.0,
            text=data.get("text") or "",
            font_size=_optional_float(data.get("fontSize")),
            color=data.get("color") or "",
            bold=bool(data.get("bold", False)),
            italic=bool(data.get("italic", False)),
            font_face=data.get("fontFace") or "",
            align=data.get("align") or "left",
            shape_type=data.get("shapeType") or "rect",
            fill=Fill.from_dict(fill) if isinstance(fill, dict) else None,
            line=Border.from_dict(line) if isinstance(line, dict) else None,
            paragraphs=tuple(
                Paragraph.from_dict(item) for item in data.get("paragraphs") or []
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.element_id,
            "text": self.text,
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "fontSize": self.font_size,
            "color": self.color,
            "bold": self.bold,
            "italic": self.italic,
            "fontFace": self.font_face,
            "align": self.align,
            "shapeType": self.shape_type,
            "paragraphs": [paragraph.to_dict() for paragraph in self.paragraphs],
        }
        if self.fill is not None:
            payload["fill"] = self.fill.to_dict()
        if self.line is not None:
            payload["line"] = self.line.to_dict()
        return payload


@dataclass(frozen=True, slots=True)
class SlideNumberSpec:
    """Placement and styling of the slide number field."""

    x: float
    y: float
    w: float
    h: float
    font_size: Optional[float] = None
    font: str = ""
    color: str = ""
    bold: bool = False
    align: str = "l"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SlideNumberSpec":
        return cls(
            x=_optional_float(data.get("x")) or 0.0,
            y=_optional_float(data.get("y")) or 0.0,
            w=_optional_float(data.get("w")) or 0.0,
            h=_optional_float(data.get("h")) or 0.0,
            font_size=_optional_float(data.get("fontSize")),
            font=data.get("font") or "",
            color=data.get("color") or "",
            bold=bool(data.get("bold", False)),
            align=data.get("align") or "l",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "fontSize": self.font_size,
            "font": self.font,
            "color": self.color,
            "bold": self.bold,
            "align": self.align,
        }


@dataclass(frozen=True, slots=True)
class SlideTemplate:
    background: str = ""
    default_text_color: str = ""
    slide_number: Optional[SlideNumberSpec] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SlideTemplate":
        slide_number = data.get("slideNumber")
        return cls(
            background=data.get("background") or "",
            default_text_color=data.get("defaultTextColor") or "",
            slide_number=(
                SlideNumberSpec.from_dict(slide_number)
                if isinstance(slide_number, dict)
                else None
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "background": self.background,
            "defaultTextColor": self.default_text_color,
            "slideNumber": self.slide_number.to_dict() if self.slide_number else None,
            "fixedImages": [],
        }


@dataclass(frozen=True, slots=True)
class SlideDescription:
    """Everything needed to draw one slide."""

    slide: str = "slide1"
    template: SlideTemplate = field(default_factory=SlideTemplate)
    elements: Tuple[SlideElement, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SlideDescription":
        return cls(
            slide=data.get("slide") or "slide1",
            template=SlideTemplate.from_dict(data.get("template") or {}),
            elements=tuple(
                SlideElement.from_dict(item) for item in data.get("elements") or []
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slide": self.slide,
            "template": self.template.to_dict(),
            "elements": [element.to_dict() for element in self.elements],
            "tables": [],
            "lines": [],
        }

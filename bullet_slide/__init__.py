"""Render JSON slide descriptions with bullet runs into PPTX files."""

from .config import RendererSettings
from .exceptions import SlideDeckError, SlideDescriptionError, SlideRenderError
from .paragraph_flattener import (
    SHAPE_ONLY,
    FragmentOptions,
    RenderableFragment,
    flatten_element,
    flatten_paragraph,
    flatten_paragraphs,
)
from .pptx_renderer import SlideDeckRenderer, WriteFailed, WriteResult, WriteSucceeded
from .slide_document import SlideDescriptionStore, load_default_description
from .slide_models import (
    Border,
    Bullet,
    Fill,
    Paragraph,
    Run,
    SlideDescription,
    SlideElement,
    SlideNumberSpec,
    SlideTemplate,
)

__all__ = [
    "RendererSettings",
    "SlideDeckError",
    "SlideDescriptionError",
    "SlideRenderError",
    "SHAPE_ONLY",
    "FragmentOptions",
    "RenderableFragment",
    "flatten_element",
    "flatten_paragraph",
    "flatten_paragraphs",
    "SlideDeckRenderer",
    "WriteResult",
    "WriteSucceeded",
    "WriteFailed",
    "SlideDescriptionStore",
    "load_default_description",
    "Border",
    "Bullet",
    "Fill",
    "Paragraph",
    "Run",
    "SlideDescription",
    "SlideElement",
    "SlideNumberSpec",
    "SlideTemplate",
]

from typing import Optional


class SlideDeckError(Exception):
    """Base exception for slide deck generation errors"""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self):
        if self.original_error is not None:
            return f"{self.message}: {self.original_error}"
        return self.message


class SlideDescriptionError(SlideDeckError):
    """Slide description could not be read or parsed"""
    pass


class SlideRenderError(SlideDeckError):
    """python-pptx failed to build the slide"""
    pass

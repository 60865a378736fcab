"""Custom exceptions for the cover assembly pipeline.

Page size detection never raises: it falls back to a default size. Every
other stage raises one of these and the pipeline propagates it unchanged.
"""


class CoverAssemblerError(Exception):
    """Base exception for all cover assembly errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class TemplateValidationError(CoverAssemblerError):
    """Raised when a cover template lacks required structure.

    Carries every violated check, not just the first.
    """

    def __init__(self, message: str, errors: list[str] | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)


class RenderError(CoverAssemblerError):
    """Raised when a cover page cannot be rendered or renders empty."""

    pass


class MergeError(CoverAssemblerError):
    """Raised when the cover and manuscript cannot be merged."""

    pass

"""Custom exceptions for entrycard."""

from typing import Optional


class EntryCardError(Exception):
    """Base exception for entrycard errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class InputError(EntryCardError):
    """Exception raised when card input cannot be read or decoded."""

    pass


class RenderingError(EntryCardError):
    """Exception raised during SVG rendering."""

    pass


class WatermarkError(EntryCardError):
    """Exception raised while building the watermark overlay."""

    pass

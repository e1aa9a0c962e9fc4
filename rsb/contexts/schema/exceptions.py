"""Exceptions raised while loading and decoding resume documents."""

from pathlib import Path
from typing import Optional


class ResumeError(Exception):
    """Base class for every error raised by the schema context."""


class ResumeIOError(ResumeError):
    """
    Exception raised when an input file cannot be read.

    Attributes:
        path: Path that failed to load
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path

        parts = [message]
        if path is not None:
            parts.append(f"File: {path}")

        super().__init__("\n".join(parts))


class UnknownFormatError(ResumeError):
    """
    Exception raised when no decoder is registered for an input format.

    Attributes:
        extension: Extension (or format name) that was not recognized
        path: Input path, when the format came from a file name
    """

    def __init__(self, extension: str, path: Optional[Path] = None, message: Optional[str] = None):
        self.extension = extension
        self.path = path

        if message is None:
            if extension:
                message = f"Unrecognized file type: {extension}"
            else:
                message = "Can not determine file type: input has no extension"
        self.message = message

        parts = [message]
        if path is not None:
            parts.append(f"File: {path}")

        super().__init__("\n".join(parts))


class DecodeError(ResumeError, ValueError):
    """
    Exception raised when input text does not decode into the resume model.

    Covers syntax errors reported by the underlying decoder as well as shape
    mismatches (e.g. a string where a list is expected).

    Attributes:
        detail: Underlying decoder message
        field_path: Dotted path to the offending field (e.g. 'education[0].courses')
    """

    def __init__(self, detail: str, field_path: Optional[str] = None):
        self.detail = detail
        self.field_path = field_path

        if field_path:
            message = f"{field_path}: {detail}"
        else:
            message = detail

        super().__init__(message)


class DateError(ResumeError, ValueError):
    """
    Exception raised when a partial date fails validation.

    Attributes:
        text: The rejected input text
        field_path: Set when the date was found while decoding a document
    """

    def __init__(self, message: str, text: str):
        self.message = message
        self.text = text
        self.field_path: Optional[str] = None
        super().__init__(message)

    def __str__(self) -> str:
        if self.field_path:
            return f"{self.field_path}: {self.message}"
        return self.message


class GrammarMismatchError(DateError):
    """Raised when text does not match YYYY, YYYY-MM or YYYY-MM-DD."""

    def __init__(self, text: str):
        super().__init__(
            f"not a valid date: {text!r}. "
            "Date must match one of these formats - YYYY, YYYY-MM, YYYY-MM-DD",
            text,
        )


class InvalidCalendarDateError(DateError):
    """
    Raised when the text is well formed but names no real calendar date.

    Attributes:
        year: Parsed year
        month: Parsed month (None for year-only input)
        day: Parsed day (None unless the input had three parts)
    """

    def __init__(self, text: str, year: int, month: Optional[int] = None, day: Optional[int] = None):
        self.year = year
        self.month = month
        self.day = day

        shown = "/".join(str(part) for part in (year, month, day) if part is not None)
        super().__init__(f"invalid or out-of-range date {shown}", text)


class EvaluationError(ResumeError):
    """
    Exception raised when the jsonnet evaluator fails.

    The evaluator's own message is passed through unchanged.

    Attributes:
        path: Jsonnet file being evaluated
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path
        super().__init__(message)

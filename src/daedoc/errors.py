"""Parse errors raised while extracting documentation.

Every failure is fatal to the whole run. A ``ParseError`` names what went
wrong (``kind``), the offending input (``context``) and where it starts.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MALFORMED_BLOCK = "MalformedBlock"
    INVALID_ANNOTATION = "InvalidAnnotation"
    INVALID_DECLARATION = "InvalidDeclaration"


# Contexts longer than this are shortened in str(error), never in .context
_MAX_CONTEXT = 120


class ParseError(Exception):
    """Base exception for doc-comment parsing."""

    kind: ErrorKind

    def __init__(self, message: str, context: str, line_number: int = 0):
        super().__init__(message)
        self.message = message
        self.context = context
        self.line_number = line_number

    def __str__(self) -> str:
        context = self.context.strip()
        if len(context) > _MAX_CONTEXT:
            context = context[: _MAX_CONTEXT - 3] + "..."
        location = f" at line {self.line_number}" if self.line_number else ""
        return f"{self.kind.value}{location}: {self.message}: {context!r}"


class MalformedBlockError(ParseError):
    """Raised when the remaining input is not a complete documentation block."""

    kind = ErrorKind.MALFORMED_BLOCK


class InvalidAnnotationError(ParseError):
    """Raised when a comment line fails the @param/@global/@return grammar."""

    kind = ErrorKind.INVALID_ANNOTATION


class InvalidDeclarationError(ParseError):
    """Raised when a declaration does not match the function signature grammar."""

    kind = ErrorKind.INVALID_DECLARATION

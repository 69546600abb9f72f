"""daedoc - Markdown reference docs from Daedalus /// doc comments."""

from daedoc.config import RenderOptions
from daedoc.errors import (
    ErrorKind,
    InvalidAnnotationError,
    InvalidDeclarationError,
    MalformedBlockError,
    ParseError,
)
from daedoc.extractors import parse, parse_block, parse_comment, parse_signature
from daedoc.generators import generate_markdown, render, render_unit
from daedoc.models import (
    DocumentationUnit,
    Global,
    Parameter,
    RawBlock,
    Return,
    ValidationResult,
)
from daedoc.scanner import scan_blocks
from daedoc.validators import compute_coverage, validate_units

__all__ = [
    "DocumentationUnit",
    "ErrorKind",
    "Global",
    "InvalidAnnotationError",
    "InvalidDeclarationError",
    "MalformedBlockError",
    "Parameter",
    "ParseError",
    "RawBlock",
    "RenderOptions",
    "Return",
    "ValidationResult",
    "compute_coverage",
    "generate_markdown",
    "parse",
    "parse_block",
    "parse_comment",
    "parse_signature",
    "render",
    "render_unit",
    "scan_blocks",
    "validate_units",
]

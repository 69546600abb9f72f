"""Documentation extractors for Daedalus doc comments and declarations."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from .errors import InvalidAnnotationError, InvalidDeclarationError
from .models import Annotation, DocumentationUnit, Global, Parameter, RawBlock, Return
from .scanner import COMMENT_MARKER, TERMINATOR, scan_blocks

log = logging.getLogger(__name__)

IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_]*"
TAGS = ("@param", "@global", "@return")

_NAMED_TAG_RE = re.compile(rf"^@(param|global)\s+({IDENTIFIER})\s+(\S.*)$")
_RETURN_TAG_RE = re.compile(r"^@return\s+(\S.*)$")

# <keyword> <return type> <name> ( <parameters> )
_SIGNATURE_RE = re.compile(
    rf"^\s*{IDENTIFIER}\s+{IDENTIFIER}\s+({IDENTIFIER})\s*\(([^()]*)\)\s*$"
)


def _strip_marker(line: str, line_number: int) -> str:
    """Return the content of a /// comment line without marker or padding."""
    stripped = line.strip()
    if not stripped.startswith(COMMENT_MARKER):
        raise InvalidAnnotationError("not a /// comment line", line, line_number)
    return stripped[len(COMMENT_MARKER) :].strip()


def _parse_annotation(content: str, line: str, line_number: int) -> Annotation:
    """Parse one tag line (marker already stripped)."""
    if content.split(None, 1)[0] == "@return":
        match = _RETURN_TAG_RE.match(content)
        if not match:
            raise InvalidAnnotationError(
                "expected '@return <description>'", line, line_number
            )
        return Return(match.group(1).strip())

    match = _NAMED_TAG_RE.match(content)
    if not match:
        tag = content.split(None, 1)[0]
        raise InvalidAnnotationError(
            f"expected '{tag} <name> <description>'", line, line_number
        )
    kind, name, description = match.groups()
    if kind == "param":
        return Parameter(name, description.strip())
    return Global(name, description.strip())


def parse_comment(
    lines: Sequence[str], line_numbers: Sequence[int] | None = None
) -> tuple[str | None, tuple[Annotation, ...]]:
    """Parse /// comment lines into (description, annotations).

    The description is every text line up to the first blank comment line
    or tag line, joined with spaces. Blank lines are separators and are
    dropped. Annotations keep source order. ``line_numbers``, when given,
    must be as long as ``lines``.
    """
    if line_numbers is None:
        line_numbers = range(1, len(lines) + 1)

    description_lines: list[str] = []
    description_done = False
    annotations: list[Annotation] = []

    for line, line_number in zip(lines, line_numbers, strict=True):
        content = _strip_marker(line, line_number)
        if not content:
            if description_lines:
                description_done = True
            continue

        if content.split(None, 1)[0] in TAGS:
            description_done = True
            annotations.append(_parse_annotation(content, line, line_number))
            continue

        if description_done:
            raise InvalidAnnotationError(
                "unexpected text after the description, "
                "expected @param, @global or @return",
                line,
                line_number,
            )
        description_lines.append(content)

    description = " ".join(description_lines) or None
    return description, tuple(annotations)


def parse_signature(
    declaration: str, line_number: int = 0
) -> tuple[str, tuple[str, ...], str]:
    """Parse a declaration into (name, parameter signatures, declaration text).

    ``declaration`` is everything before the ``{};`` terminator. The two
    identifiers in front of the name (keyword and return type) are required
    but dropped.
    """
    match = _SIGNATURE_RE.match(declaration)
    if not match:
        raise InvalidDeclarationError(
            "expected '<keyword> <type> <name>(<parameters>)'",
            declaration,
            line_number,
        )
    name, params_text = match.groups()

    if not params_text.strip():
        params: tuple[str, ...] = ()
    else:
        params = tuple(p.strip() for p in params_text.split(","))
        if not all(params):
            raise InvalidDeclarationError(
                "empty parameter in parameter list", declaration, line_number
            )

    return name, params, f"{declaration.strip()} {TERMINATOR}"


def parse_block(block: RawBlock) -> DocumentationUnit:
    """Couple a block's comment and declaration into a DocumentationUnit."""
    description, annotations = parse_comment(
        block.comment_lines, block.comment_line_numbers
    )
    name, params, declaration_text = parse_signature(
        block.declaration, block.declaration_line
    )
    log.debug("Parsed %s (%d annotations)", name, len(annotations))
    return DocumentationUnit(
        function_name=name,
        declaration_text=declaration_text,
        description=description,
        annotations=annotations,
        parameter_signatures=params,
        line_number=block.line_number,
    )


def parse(text: str) -> list[DocumentationUnit]:
    """Parse every documentation block in ``text``.

    All or nothing: the first malformed block raises and no units are
    returned.
    """
    return [parse_block(block) for block in scan_blocks(text)]

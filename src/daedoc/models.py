"""Data models for doc-comment extraction."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawBlock:
    """One documentation comment run plus the declaration that follows it."""

    comment_lines: tuple[str, ...]  # Lines still carrying the /// marker
    comment_line_numbers: tuple[int, ...]  # 1-based, parallel to comment_lines
    declaration: str  # Text between the comment run and the {}; terminator
    line_number: int  # 1-based line of the first comment line
    declaration_line: int  # 1-based line where the declaration starts


@dataclass(frozen=True)
class Parameter:
    """@param annotation."""

    name: str
    description: str


@dataclass(frozen=True)
class Global:
    """@global annotation."""

    name: str
    description: str


@dataclass(frozen=True)
class Return:
    """@return annotation."""

    description: str


Annotation = Parameter | Global | Return


@dataclass(frozen=True)
class DocumentationUnit:
    """One documented function, ready for rendering."""

    function_name: str
    declaration_text: str  # Signature with the body replaced by {};
    description: str | None = None
    annotations: tuple[Annotation, ...] = ()
    parameter_signatures: tuple[str, ...] = ()  # "var int docID", in order
    line_number: int = 0

    @property
    def parameters(self) -> list[Parameter]:
        return [a for a in self.annotations if isinstance(a, Parameter)]

    @property
    def global_refs(self) -> list[Global]:
        return [a for a in self.annotations if isinstance(a, Global)]

    @property
    def returns(self) -> str | None:
        """Description of the first @return; later ones are ignored."""
        for annotation in self.annotations:
            if isinstance(annotation, Return):
                return annotation.description
        return None


@dataclass
class ValidationResult:
    """Results from documentation validation."""

    errors: list[str] = field(default_factory=list)  # Build fails if non-empty
    warnings: list[str] = field(default_factory=list)  # Logged but allowed

"""Documentation quality checks.

None of these affect rendering. They report what a reviewer would want
to know about the doc comments, as warnings (or errors in strict mode).
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import DocumentationUnit, Return, ValidationResult


def validate_units(
    units: Sequence[DocumentationUnit], strict: bool = False
) -> ValidationResult:
    """Validate extracted documentation.

    Checks:
    1. Every function should have a description
    2. @param count should match the declaration's parameter count
    3. At most one @return (only the first is rendered)

    Args:
        units: Parsed documentation units
        strict: If True, findings are errors instead of warnings

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult()
    findings = result.errors if strict else result.warnings

    for unit in units:
        where = f"{unit.function_name} (line {unit.line_number})"

        if not unit.description:
            findings.append(f"{where}: missing description")

        documented = len(unit.parameters)
        declared = len(unit.parameter_signatures)
        if documented != declared:
            findings.append(
                f"{where}: {documented} @param annotations "
                f"for {declared} declared parameters"
            )

        returns = sum(1 for a in unit.annotations if isinstance(a, Return))
        if returns > 1:
            findings.append(f"{where}: {returns} @return annotations, using the first")

    return result


def compute_coverage(units: Sequence[DocumentationUnit]) -> float:
    """Fraction of units with a description (1.0 when there are none)."""
    if not units:
        return 1.0
    return sum(1 for u in units if u.description) / len(units)

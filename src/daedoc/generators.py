"""Markdown generation for documented functions.

Output is meant for MkDocs Material: each function becomes a level-3
heading followed by a ``function`` admonition holding the description,
the declaration and the Parameters / Globals / Return value sections.
"""

from __future__ import annotations

from collections.abc import Iterable

from .config import RenderOptions
from .extractors import parse
from .models import DocumentationUnit, Parameter

ADMONITION = "function"
LANGUAGE_TAG = "dae"

PARAMETERS_LABEL = "Parameters"
GLOBALS_LABEL = "Globals"
RETURN_LABEL = "Return value"


def _param_label(
    unit: DocumentationUnit, index: int, param: Parameter, options: RenderOptions
) -> str:
    """Inline code span naming the index-th @param."""
    if options.param_style == "signature" and index < len(unit.parameter_signatures):
        # Highlighted inline code, pymdownx.inlinehilite syntax
        return f"`#!{LANGUAGE_TAG} {unit.parameter_signatures[index]}`"
    return f"`{param.name}`"


def _section(label: str, indent: str) -> list[str]:
    # Two trailing spaces force a line break after the label
    return ["", f"{indent}**{label}**  "]


def render_unit(unit: DocumentationUnit, options: RenderOptions | None = None) -> str:
    """Render one DocumentationUnit as a Markdown fragment ending in a newline."""
    if options is None:
        options = RenderOptions()
    indent = options.indent
    name = unit.function_name

    lines = [
        f"### `{name}`",
        f'!!! {ADMONITION} "`{name}`"',
    ]

    if unit.description:
        lines.append(f"{indent}{unit.description}")

    lines.append(f"{indent}```{LANGUAGE_TAG}")
    lines.extend(f"{indent}{line}" for line in unit.declaration_text.split("\n"))
    lines.append(f"{indent}```")

    params = unit.parameters
    if params:
        lines.extend(_section(PARAMETERS_LABEL, indent))
        for i, param in enumerate(params):
            label = _param_label(unit, i, param, options)
            lines.append(f"{indent}- {label} - {param.description}")

    global_refs = unit.global_refs
    if global_refs:
        lines.extend(_section(GLOBALS_LABEL, indent))
        for ref in global_refs:
            lines.append(f"{indent}- `{ref.name}` - {ref.description}")

    returns = unit.returns
    if returns is not None:
        lines.extend(_section(RETURN_LABEL, indent))
        if options.return_lead_in:
            returns = f"{options.return_lead_in.strip()} {returns}"
        lines.append(f"{indent}{returns}")

    return "\n".join(lines) + "\n"


def render(
    units: Iterable[DocumentationUnit], options: RenderOptions | None = None
) -> str:
    """Render units in order, one blank line between fragments."""
    return "\n".join(render_unit(unit, options) for unit in units)


def generate_markdown(text: str, options: RenderOptions | None = None) -> str:
    """Parse ``text`` and render every documented function.

    Raises:
        ParseError: On the first malformed block; nothing is rendered.
    """
    return render(parse(text), options)

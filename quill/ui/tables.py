"""Rich table formatters for scope listings."""

from __future__ import annotations

from rich.table import Table

from quill.models.scope import GLOBAL_SCOPE_NAME, ScopeDeclaration


def group_declarations(declarations: list[ScopeDeclaration]) -> dict[str, list[int]]:
    """Map each declared scope name to the lines declaring it, in first-seen order."""
    grouped: dict[str, list[int]] = {}
    for declaration in declarations:
        for name in declaration.scopes:
            grouped.setdefault(name, []).append(declaration.line)
    return grouped


def scope_table(declarations: list[ScopeDeclaration], *, title: str | None = None) -> Table:
    """Build a Rich Table listing declared scopes with their declaration lines."""
    table = Table(title=title, show_lines=False, pad_edge=False)
    table.add_column("Scope", style="bold")
    table.add_column("Declarations", justify="right")
    table.add_column("Lines", style="muted")

    for name, lines in group_declarations(declarations).items():
        style = "scope.global" if name == GLOBAL_SCOPE_NAME else "scope"
        table.add_row(
            f"[{style}]{name}[/{style}]",
            str(len(lines)),
            ", ".join(str(line) for line in lines),
        )
    return table

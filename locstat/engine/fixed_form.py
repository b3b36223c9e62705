"""Fixed-form adapter — column-sensitive pre-pass for legacy source layouts."""

from __future__ import annotations

from locstat.engine.models import LanguageProfile, LineKind


def classify_fixed_form(line: str, profile: LanguageProfile) -> LineKind | None:
    """Apply the profile's fixed-column rule to *line*.

    Returns ``LineKind.COMMENT`` when the marker column holds one of the
    rule's marker characters, or ``None`` to hand the line to the generic
    engine. Columns are 1-indexed and counted in characters. The column rule
    wins over any free-form token on the same line.
    """
    rule = profile.fixed_column
    if rule is None:
        return None
    index = rule.column - 1
    if index < len(line) and line[index] in rule.markers:
        return LineKind.COMMENT
    return None

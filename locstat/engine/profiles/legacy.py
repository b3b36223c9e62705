"""Profiles for classic and column-sensitive languages."""

from __future__ import annotations

from locstat.engine.models import BlockPair, FixedColumnRule, LanguageProfile
from locstat.engine.registry import register_profile

# Both Pascal delimiter styles nest independently of each other.
register_profile(
    LanguageProfile(
        name="Pascal",
        line_comments=("//",),
        block_comments=(
            BlockPair("{", "}", nestable=True),
            BlockPair("(*", "*)", nestable=True),
        ),
        quotes=("'",),
        quote_escape=None,
    )
)

# ALGOL 60 "comment ... ;" plus the ALGOL 68 "co ... co" and "# ... #" forms.
register_profile(
    LanguageProfile(
        name="Algol",
        block_comments=(
            BlockPair("comment", ";"),
            BlockPair("co", "co"),
            BlockPair("#", "#"),
        ),
        quotes=('"',),
        quote_escape=None,
        case_sensitive=False,
    )
)

# Fixed-format indicator area is column 7; "*>" is the free-format comment.
register_profile(
    LanguageProfile(
        name="COBOL",
        line_comments=("*>",),
        quotes=('"', "'"),
        quote_escape=None,
        fixed_column=FixedColumnRule(column=7, markers=frozenset("*/")),
    )
)

register_profile(
    LanguageProfile(
        name="Fortran Legacy",
        line_comments=("!",),
        quotes=('"', "'"),
        quote_escape=None,
        fixed_column=FixedColumnRule(column=1, markers=frozenset("Cc*Dd!")),
    )
)

register_profile(
    LanguageProfile(
        name="Fortran Modern",
        line_comments=("!",),
        quotes=('"', "'"),
        quote_escape=None,
    )
)

# "*" in column 1 is a comment line for IBM-style assemblers.
register_profile(
    LanguageProfile(
        name="Assembly",
        line_comments=(";", "#", "//"),
        quotes=('"', "'"),
        quote_escape=None,
        fixed_column=FixedColumnRule(column=1, markers=frozenset("*")),
    )
)

register_profile(
    LanguageProfile(
        name="DCL",
        line_comments=("$!", "!"),
        quotes=('"',),
        quote_escape=None,
    )
)

register_profile(
    LanguageProfile(
        name="IPLAN",
        line_comments=("!",),
        block_comments=(BlockPair("/*", "*/"),),
        quotes=('"',),
    )
)

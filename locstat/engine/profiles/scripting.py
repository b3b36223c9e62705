"""Profiles for scripting and shell languages."""

from __future__ import annotations

from locstat.engine.models import BlockPair, LanguageProfile
from locstat.engine.registry import register_profile

# Triple-quoted strings are counted as comments (docstrings). They win over
# the plain quote at the same column because they are the longer token.
register_profile(
    LanguageProfile(
        name="Python",
        line_comments=("#",),
        block_comments=(BlockPair('"""', '"""'), BlockPair("'''", "'''")),
        quotes=('"', "'"),
        shebang=True,
    )
)

register_profile(
    LanguageProfile(
        name="Shell",
        line_comments=("#",),
        quotes=('"', "'"),
        shebang=True,
    )
)

register_profile(
    LanguageProfile(
        name="TCL",
        line_comments=("#",),
        quotes=('"',),
        shebang=True,
    )
)

register_profile(
    LanguageProfile(
        name="Ruby",
        line_comments=("#",),
        block_comments=(BlockPair("=begin", "=end", anchored=True),),
        quotes=('"', "'"),
        shebang=True,
    )
)

# POD sections run from any command paragraph up to =cut.
_POD_COMMANDS = (
    "=pod",
    "=head1",
    "=head2",
    "=head3",
    "=head4",
    "=over",
    "=item",
    "=back",
    "=begin",
    "=end",
    "=for",
    "=encoding",
)

register_profile(
    LanguageProfile(
        name="Perl",
        line_comments=("#",),
        block_comments=tuple(
            BlockPair(cmd, "=cut", anchored=True) for cmd in _POD_COMMANDS
        ),
        quotes=('"', "'"),
        shebang=True,
    )
)

# PHP 8 attributes (#[...]) look like hash comments but are code.
register_profile(
    LanguageProfile(
        name="PHP",
        line_comments=("//", "#"),
        block_comments=(BlockPair("/*", "*/"),),
        doc_comments=("#[",),
        doc_comments_are_code=True,
        quotes=('"', "'"),
    )
)

register_profile(
    LanguageProfile(
        name="PowerShell",
        line_comments=("#",),
        block_comments=(BlockPair("<#", "#>"),),
        quotes=('"', "'"),
        quote_escape="`",
    )
)

register_profile(
    LanguageProfile(
        name="Batch",
        line_comments=("REM", "::"),
        case_sensitive=False,
    )
)

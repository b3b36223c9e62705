"""Profiles for languages with C-style ``//`` and ``/* */`` comments."""

from __future__ import annotations

from locstat.engine.models import BlockPair, LanguageProfile
from locstat.engine.registry import register_profile

C_BLOCK = BlockPair("/*", "*/")
HTML_BLOCK = BlockPair("<!--", "-->")


def _c_style(name: str, *, quotes: tuple[str, ...] = ('"', "'"), **kwargs) -> LanguageProfile:
    return LanguageProfile(
        name=name,
        line_comments=("//",),
        block_comments=(C_BLOCK,),
        quotes=quotes,
        **kwargs,
    )


register_profile(_c_style("C/C++"))
register_profile(_c_style("C#", doc_comments=("///",)))
register_profile(_c_style("Java"))
register_profile(_c_style("Go", quotes=('"', "'", "`")))
register_profile(_c_style("Protobuf"))

# Scala block comments nest; single quotes also introduce symbols.
register_profile(
    LanguageProfile(
        name="Scala",
        line_comments=("//",),
        block_comments=(BlockPair("/*", "*/", nestable=True),),
        quotes=('"',),
        char_literals=("'\"'", "'\\\"'"),
    )
)

# Rust block comments nest; single quotes are lifetimes as often as chars.
register_profile(
    LanguageProfile(
        name="Rust",
        line_comments=("//",),
        block_comments=(BlockPair("/*", "*/", nestable=True),),
        doc_comments=("///", "//!"),
        quotes=('"',),
        char_literals=("'\"'", "'\\\"'"),
    )
)

# JavaScript family also accepts the legacy HTML-style comment delimiters.
for _name in ("JavaScript", "TypeScript", "JSX", "TSX"):
    register_profile(
        LanguageProfile(
            name=_name,
            line_comments=("//",),
            block_comments=(C_BLOCK, HTML_BLOCK),
            quotes=('"', "'", "`"),
        )
    )

"""Profiles for configuration and build files."""

from __future__ import annotations

from locstat.engine.models import BlockPair, LanguageProfile
from locstat.engine.registry import register_profile

for _name in ("YAML", "TOML", "Makefile", "Dockerfile"):
    register_profile(LanguageProfile(name=_name, line_comments=("#",)))

register_profile(LanguageProfile(name="INI", line_comments=(";", "#")))

# CMake 3.0 bracket comments: #[[ ... ]]
register_profile(
    LanguageProfile(
        name="CMake",
        line_comments=("#",),
        block_comments=(BlockPair("#[[", "]]"),),
        quotes=('"',),
    )
)

register_profile(
    LanguageProfile(
        name="HCL",
        line_comments=("//", "#"),
        block_comments=(BlockPair("/*", "*/"),),
        quotes=('"',),
    )
)

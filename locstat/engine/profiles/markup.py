"""Profiles for markup, template and data formats."""

from __future__ import annotations

from locstat.engine.models import BlockPair, LanguageProfile
from locstat.engine.registry import register_data_format, register_profile

XML_BLOCK = BlockPair("<!--", "-->")

# Prose between tags is full of apostrophes, so markup profiles carry no quotes.
for _name in ("XML", "HTML", "SVG", "XSL"):
    register_profile(LanguageProfile(name=_name, block_comments=(XML_BLOCK,)))

register_profile(
    LanguageProfile(
        name="Velocity",
        line_comments=("##",),
        block_comments=(BlockPair("#*", "*#"),),
    )
)

# {{!-- ... --}} is covered too: its closing delimiter ends with }}.
register_profile(
    LanguageProfile(
        name="Mustache",
        block_comments=(BlockPair("{{!", "}}"),),
    )
)

register_data_format("JSON")
register_data_format("ReStructuredText")

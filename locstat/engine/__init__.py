"""Line classification engine — code/comment/blank verdicts per physical line."""

from locstat.engine.registry import (
    GENERIC_PROFILE,
    PROFILE_REGISTRY,
    ProfileRegistry,
    get_profile,
)
# Built-in profiles register themselves on import.
import locstat.engine.profiles  # noqa: F401
from locstat.engine.analyzer import analyze_bytes, analyze_file, analyze_lines
from locstat.engine.classifier import classify_line
from locstat.engine.fixed_form import classify_fixed_form
from locstat.engine.models import (
    NORMAL,
    BlockPair,
    ClassifierState,
    FileResult,
    FixedColumnRule,
    LanguageProfile,
    LineKind,
    Stats,
)

PROFILE_REGISTRY.freeze()

__all__ = [
    "GENERIC_PROFILE",
    "NORMAL",
    "PROFILE_REGISTRY",
    "BlockPair",
    "ClassifierState",
    "FileResult",
    "FixedColumnRule",
    "LanguageProfile",
    "LineKind",
    "ProfileRegistry",
    "Stats",
    "analyze_bytes",
    "analyze_file",
    "analyze_lines",
    "classify_fixed_form",
    "classify_line",
    "get_profile",
]

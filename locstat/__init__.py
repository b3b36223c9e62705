"""locstat: code, comment and blank line counter for many languages."""

__version__ = "0.1.0"

from locstat.core.config import ScanConfig
from locstat.detect import detect_language
from locstat.engine import (
    ClassifierState,
    FileResult,
    LanguageProfile,
    LineKind,
    Stats,
    analyze_bytes,
    analyze_file,
    analyze_lines,
    classify_line,
    get_profile,
)
from locstat.exceptions import LocstatError, ScanLimitExceeded, UnknownLanguage
from locstat.models import LanguageTotals, ScanReport
from locstat.scanner import Scanner

__all__ = [
    "ClassifierState",
    "FileResult",
    "LanguageProfile",
    "LanguageTotals",
    "LineKind",
    "LocstatError",
    "ScanConfig",
    "ScanLimitExceeded",
    "ScanReport",
    "Scanner",
    "Stats",
    "UnknownLanguage",
    "analyze_bytes",
    "analyze_file",
    "analyze_lines",
    "classify_line",
    "detect_language",
    "get_profile",
]

"""Language detection by file name — extension table plus special names."""

from __future__ import annotations

# Language detection by file extension (lower-case, without the dot)
_EXTENSION_TO_LANGUAGE: dict[str, str] = {
    "rs": "Rust",
    "go": "Go",
    "py": "Python",
    "java": "Java",
    "c": "C/C++",
    "h": "C/C++",
    "cpp": "C/C++",
    "hpp": "C/C++",
    "cs": "C#",
    "js": "JavaScript",
    "ts": "TypeScript",
    "jsx": "JSX",
    "tsx": "TSX",
    "php": "PHP",
    "pl": "Perl",
    "pm": "Perl",
    "t": "Perl",
    "rb": "Ruby",
    "sh": "Shell",
    "pas": "Pascal",
    "scala": "Scala",
    "sbt": "Scala",
    "yaml": "YAML",
    "yml": "YAML",
    "json": "JSON",
    "xml": "XML",
    "xsd": "XML",
    "html": "HTML",
    "htm": "HTML",
    "xhtml": "HTML",
    "toml": "TOML",
    "mk": "Makefile",
    "mak": "Makefile",
    "ini": "INI",
    "cfg": "INI",
    "conf": "INI",
    "properties": "INI",
    "prop": "INI",
    "hcl": "HCL",
    "tf": "HCL",
    "tfvars": "HCL",
    "cmake": "CMake",
    "ps1": "PowerShell",
    "psm1": "PowerShell",
    "psd1": "PowerShell",
    "bat": "Batch",
    "cmd": "Batch",
    "tcl": "TCL",
    "rst": "ReStructuredText",
    "rest": "ReStructuredText",
    "vm": "Velocity",
    "vtl": "Velocity",
    "mustache": "Mustache",
    "proto": "Protobuf",
    "svg": "SVG",
    "xsl": "XSL",
    "xslt": "XSL",
    "alg": "Algol",
    "algol": "Algol",
    "a60": "Algol",
    "a68": "Algol",
    "cob": "COBOL",
    "cbl": "COBOL",
    "cobol": "COBOL",
    "cpy": "COBOL",  # copybooks
    "f": "Fortran Legacy",
    "for": "Fortran Legacy",
    "ftn": "Fortran Legacy",
    "f77": "Fortran Legacy",
    "f90": "Fortran Modern",
    "f95": "Fortran Modern",
    "f03": "Fortran Modern",
    "f08": "Fortran Modern",
    "f18": "Fortran Modern",
    "asm": "Assembly",
    "s": "Assembly",
    "com": "DCL",  # OpenVMS command procedures
    "ipl": "IPLAN",
}

_MAKEFILE_NAMES = frozenset({"makefile", "gnumakefile", "bsdmakefile"})

_SHELL_DOTFILES = frozenset(
    {
        ".bashrc",
        ".bash_profile",
        ".profile",
        ".zshrc",
        ".zprofile",
        ".zshenv",
        ".kshrc",
        ".cshrc",
    }
)


def detect_language(file_name: str) -> str | None:
    """Map a bare file name to a registered language identifier.

    Returns ``None`` for names the tool does not count.
    """
    lower = file_name.lower()
    if lower.startswith("dockerfile"):
        return "Dockerfile"
    if lower in _MAKEFILE_NAMES:
        return "Makefile"
    if lower == "cmakelists.txt":
        return "CMake"
    if lower in _SHELL_DOTFILES:
        return "Shell"

    stem, dot, ext = lower.rpartition(".")
    if not dot or not stem:
        return None
    return _EXTENSION_TO_LANGUAGE.get(ext)


def supported_extensions() -> dict[str, str]:
    """Copy of the extension table, for listings."""
    return dict(_EXTENSION_TO_LANGUAGE)

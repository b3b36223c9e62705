"""Language profiles — auto-registered on import."""

from locstat.engine.profiles import (
    c_family,  # noqa: F401
    config_files,  # noqa: F401
    legacy,  # noqa: F401
    markup,  # noqa: F401
    scripting,  # noqa: F401
)

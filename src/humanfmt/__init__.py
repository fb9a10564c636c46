"""Human-readable byte sizes, ordinals and relative times."""

from humanfmt.core.ordinal import ordinal
from humanfmt.core.reltime import format_relative, format_relative_now
from humanfmt.core.sizes import format_bytes, format_ibytes

__all__ = [
    "format_bytes",
    "format_ibytes",
    "format_relative",
    "format_relative_now",
    "ordinal",
]

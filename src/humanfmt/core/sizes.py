"""Byte-size formatting in SI (1000-based) and IEC (1024-based) units."""

import logging
import operator

logger = logging.getLogger(__name__)

# IEC sizes (1024)
BYTE = 1
KI_BYTE = BYTE << 10
MI_BYTE = KI_BYTE << 10
GI_BYTE = MI_BYTE << 10
TI_BYTE = GI_BYTE << 10
PI_BYTE = TI_BYTE << 10
EI_BYTE = PI_BYTE << 10

# SI sizes (1000)
K_BYTE = BYTE * 1000
M_BYTE = K_BYTE * 1000
G_BYTE = M_BYTE * 1000
T_BYTE = G_BYTE * 1000
P_BYTE = T_BYTE * 1000
E_BYTE = P_BYTE * 1000

SI_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB")
IEC_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")

_UNITS_BY_BASE = {1000: SI_UNITS, 1024: IEC_UNITS}


def _exponent(magnitude: int, base: int, max_exponent: int) -> int:
    """Integer floor of log_base(magnitude), clamped to max_exponent."""
    exponent = 0
    power = base
    while power <= magnitude:
        exponent += 1
        power *= base
    if exponent > max_exponent:
        logger.debug(
            "Clamping exponent %d to %d for %d", exponent, max_exponent, magnitude
        )
        return max_exponent
    return exponent


def format_size(magnitude: int, base: int = 1000) -> str:
    """Format a byte count using the unit table for ``base``.

    Args:
        magnitude: Non-negative number of bytes.
        base: 1000 for SI units or 1024 for IEC units.

    Returns:
        A short string such as "5 kB", "12.0 MiB" or "7 B".

    Raises:
        ValueError: If ``magnitude`` is negative or ``base`` is unsupported.
        TypeError: If ``magnitude`` is not an integer.
    """
    if isinstance(magnitude, bool):
        raise TypeError("magnitude must be an integer, not bool")
    magnitude = operator.index(magnitude)
    if magnitude < 0:
        raise ValueError(f"magnitude must be non-negative, got {magnitude}")
    try:
        units = _UNITS_BY_BASE[base]
    except KeyError:
        raise ValueError(f"base must be 1000 or 1024, got {base!r}") from None

    if magnitude < 10:
        return f"{magnitude} B"

    exponent = _exponent(magnitude, base, len(units) - 1)
    scaled = magnitude // base**exponent
    unit = units[exponent]

    # scaled is already floored, so the one-decimal form always ends in .0
    if scaled < 10:
        return f"{scaled} {unit}"
    return f"{scaled:.1f} {unit}"


def format_bytes(magnitude: int) -> str:
    """Format bytes with decimal units (kB, MB, ...)."""
    return format_size(magnitude, 1000)


def format_ibytes(magnitude: int) -> str:
    """Format bytes with binary units (KiB, MiB, ...)."""
    return format_size(magnitude, 1024)

"""Human-readable byte counts."""

from __future__ import annotations

KILO_THRESHOLD = 600
MEGA_THRESHOLD = 1_400_000
GIGA_THRESHOLD = 1_400_000_000

_SCALED_UNITS: tuple[tuple[int, int, str], ...] = (
    (MEGA_THRESHOLD, 1_000, "kB"),
    (GIGA_THRESHOLD, 1_000_000, "MB"),
)


def format_size(byte_count: int) -> str:
    """Format ``byte_count`` with decimal units and two fractional digits.

    Counts below 600 print as whole bytes. Each upper threshold is inclusive,
    so ``1_400_000`` is still ``"1400.00 kB"``. ``GB`` is the largest unit.
    """
    if byte_count < KILO_THRESHOLD:
        return f"{byte_count} B"
    for upper, divisor, unit in _SCALED_UNITS:
        if byte_count <= upper:
            return f"{byte_count / divisor:.2f} {unit}"
    return f"{byte_count / 1_000_000_000:.2f} GB"


__all__ = ["format_size"]

"""Shared utilities and console setup."""

from rich.console import Console

# Singleton console for consistent output
console = Console()


def parse_number(value: str | int) -> int:
    """
    Parse a non-negative integer made of ASCII digits only.

    Ints pass through when non-negative. Signs, whitespace and non-ASCII
    digits are rejected.

    Raises:
        ValueError: If the value is not a non-negative integer
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid number {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"invalid number {value!r}")
        return value
    if not value or not value.isascii() or not value.isdigit():
        raise ValueError(f"invalid number {value!r}")
    return int(value)

"""Formatting and serialization utilities."""

import math


def round_to_length(number: float, length: int) -> str:
    """Render ``number`` in exponent notation using at most ``length`` characters.

    Characters are reserved for the sign, the exponent marker and sign, the
    decimal point, the leading digit and the exponent digits (three when the
    magnitude needs a three-digit exponent, otherwise two). Whatever remains
    becomes the precision of the mantissa.

    Args:
        number: Value to render.
        length: Maximum width of the result, at least 5.

    Returns:
        ``"0.0"`` for zero, ``str(number)`` for non-finite values, otherwise
        a string like ``"1.235e+02"``.

    Raises:
        ValueError: If ``length`` is smaller than 5, or too small to hold
            the sign, exponent and decimal point of ``number``.
    """
    if length < 5:
        raise ValueError(f"length must be at least 5, got {length}")

    width = length
    number = float(number)
    if number == 0.0:
        return "0.0"
    if not math.isfinite(number):
        return str(number)

    negative = number < 0.0
    if negative:
        number = -number
        length -= 1  # one character for the "-"

    if number <= 1.0:
        exp_len = math.floor(-math.log10(number)) + 1
    else:
        exp_len = math.floor(math.log10(number)) + 1

    length -= 4  # exponent sign, "e", "." and the leading digit
    if exp_len >= 100:
        length -= 3
    else:
        length -= 2

    precision = length
    if negative:
        number = -number
    if precision < 0:
        raise ValueError(f"length {width} is too small to render {number!r}")
    return f"{number:.{precision}e}"


def format_status(avg_loss: float, max_loss: float, loss_sum: float, length: int = 8) -> str:
    """Format the per-update loss summary: 'AVG: ... | MAX: ... | SUM: ...'."""
    return (
        f"AVG: {round_to_length(avg_loss, length)} | "
        f"MAX: {round_to_length(max_loss, length)} | "
        f"SUM: {round_to_length(loss_sum, length)}"
    )


def _json_default(obj):
    """JSON serializer fallback for torch/numpy scalars and arrays."""
    if hasattr(obj, 'item'):
        return obj.item()
    if hasattr(obj, 'tolist'):
        return obj.tolist()
    return str(obj)

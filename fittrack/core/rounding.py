import math
from decimal import Decimal, ROUND_HALF_UP

from fittrack.core.exceptions import InvalidArgument


def round_half_up(value: float, digits: int = 0) -> float:
    """Округление половины вверх по точному двоичному значению (как Number.toFixed)."""
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    if digits == 0:
        return int(rounded)
    return float(rounded)


def ensure_non_negative(value, name: str) -> None:
    if value is None or isinstance(value, bool):
        raise InvalidArgument(f"{name}: ожидалось число, получено {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{name}: ожидалось число, получено {value!r}")
    if not math.isfinite(number):
        raise InvalidArgument(f"{name}: значение должно быть конечным, получено {value!r}")
    if number < 0:
        raise InvalidArgument(f"{name}: значение не может быть отрицательным ({value!r})")

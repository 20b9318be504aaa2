import math


def to_number(value):
    """Coerce a JSON number or numeric string to an int or float.

    Integral values come back as int. Raises ValueError for booleans,
    NaN/inf and non-numeric text.
    """
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            value = float(text)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise ValueError(f"not a finite number: {value!r}")
        return int(value) if value.is_integer() else value
    raise ValueError(f"not a number: {value!r}")

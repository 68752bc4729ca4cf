"""Request field parsing shared by the JSON routes. Raises ValueError."""


def required_text(data, field):
    value = data.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f'{field} is required')
    return value.strip()


def optional_text(data, field):
    value = data.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f'{field} must be a string')
    return value.strip()


def optional_non_negative_int(data, field):
    value = data.get(field)
    if value is None:
        return None
    if isinstance(value, bool) or isinstance(value, float):
        raise ValueError(f'{field} must be an integer')
    try:
        value = int(value)
    except (TypeError, ValueError):
        raise ValueError(f'{field} must be an integer')
    if value < 0:
        raise ValueError(f'{field} must not be negative')
    return value

from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when a generator receives an argument outside its domain."""


def require_int(name: str, value: object, minimum: int) -> int:
    """Return *value* if it is an int >= *minimum*, else raise InvalidArgument.

    bool is rejected even though it subclasses int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}.")
    if value < minimum:
        raise InvalidArgument(f"{name} must be >= {minimum}, got {value}.")
    return value

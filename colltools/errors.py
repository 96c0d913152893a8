class ArgumentError(ValueError):
    """an argument violates a non-null contract or asks for something unsupported."""
    pass


class UnsupportedOperationError(TypeError):
    """a mutation was attempted on a read-only or immutable container."""
    pass


def require_not_none(value, name: str):
    """return value unchanged, raising ArgumentError when it is None"""
    if value is None:
        raise ArgumentError(f"{name} must not be None")
    return value

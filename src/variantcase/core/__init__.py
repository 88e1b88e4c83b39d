"""Tagged-union core: family declaration and exhaustive dispatch."""

from .variant import Handler, Variant, check_handlers

__all__ = ["Variant", "Handler", "check_handlers"]

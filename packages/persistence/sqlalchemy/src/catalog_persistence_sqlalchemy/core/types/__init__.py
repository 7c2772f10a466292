from .datetime import UtcDateTime

__all__ = ["UtcDateTime"]

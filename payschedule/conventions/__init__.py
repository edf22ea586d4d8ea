from .types import RollDirection, Weekday

__all__ = ["RollDirection", "Weekday"]

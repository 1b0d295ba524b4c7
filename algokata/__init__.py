"""Classic array, string, interval, sliding-window and stack algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "intervals", "strings", "windows", "stacks"]
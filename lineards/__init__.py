"""Bounded stacks and queues with stack-based expression tools and a command line."""

__version__ = "0.1.0"
__all__ = ["stack", "queues", "expressions", "cli"]
"""Sort integers with two stacks and push, swap and rotate operations."""

__version__ = "0.1.0"
__all__ = ["validation", "stacks", "sorting", "cli"]
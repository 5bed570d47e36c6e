"""waiter - wait for a duration or a process, then tell you about it."""

__version__ = "0.3.0"

"""HTTP gateway serving workout recommendations."""

__version__ = "0.1.0"

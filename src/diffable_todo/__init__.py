"""Single-screen todo list rendered through an explicit diffable list state."""

__version__ = "0.1.0"

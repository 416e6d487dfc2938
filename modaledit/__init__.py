"""A small modal terminal text editor with undo and redo."""

__version__ = "0.1.0"
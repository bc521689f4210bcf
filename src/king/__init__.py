"""King - a personal task-tracking assistant."""

__version__ = "0.1.0"

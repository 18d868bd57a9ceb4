"""MATLAB source-style linter with in-place fixing."""

__version__ = "0.3.0"

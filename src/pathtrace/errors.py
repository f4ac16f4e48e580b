# errors.py
"""Exceptions raised by the outer shell: settings, scene building and output."""


class RenderError(Exception):
    """Base class for errors that stop a render before it starts."""


class ConfigError(RenderError, ValueError):
    """Invalid render settings."""


class SceneError(RenderError):
    """Unknown scene name or unreadable scene input."""

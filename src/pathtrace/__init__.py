"""pathtrace: an offline CPU path-style ray tracer."""

__version__ = "0.1.0"

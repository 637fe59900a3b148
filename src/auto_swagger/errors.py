"""Errors raised while generating API documentation."""


class ConfigurationError(Exception):
    """The service file, its settings, or an override file cannot be used.

    Raised before any document is written, so a failed run never produces
    partial output.
    """

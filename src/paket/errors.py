"""Exceptions raised by the paket resolver."""


class PaketError(Exception):
    """Base class for resolver errors."""


class ConfigurationError(PaketError, ValueError):
    """Raised when a required collaborator or setting is missing or invalid."""


class UnsupportedSchemeError(PaketError):
    """Raised for a package scheme that is explicitly rejected."""

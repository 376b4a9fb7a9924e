"""Custom exceptions for attrcodec."""


class AttrCodecError(Exception):
    """Base exception for all attrcodec errors."""

    pass


class ConfigurationError(AttrCodecError):
    """Raised when a hook is misconfigured or attached to an unsupported host."""

    pass

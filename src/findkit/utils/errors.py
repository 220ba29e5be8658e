"""Typed exceptions for configuration and the compression codec."""


class ConfigError(ValueError):
    """Raised when configuration values cannot be interpreted."""


class CodecError(ValueError):
    """Base class for compression codec errors."""


class CompressionLevelError(CodecError):
    """Raised when a compression level lies outside ``0..9``."""


class DecompressionError(CodecError):
    """Raised when compressed input is malformed."""


class TruncatedStreamError(DecompressionError):
    """Raised when compressed input ends before its final block."""

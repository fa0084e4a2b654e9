class WordbookError(Exception):
    """Base class for errors raised by this service (not by the SDKs it calls)."""


class ConfigurationError(WordbookError):
    """A required client was never configured. Retrying cannot fix this."""


class EmptyResponseError(WordbookError):
    """The language model answered without any content."""

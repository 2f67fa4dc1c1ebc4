# ---------------------------------
# TYPED EXCEPTIONS
# ---------------------------------


class POIGeneratorError(RuntimeError):
    pass

class ConfigurationError(POIGeneratorError):
    """Raised when required settings (e.g. the API key) are missing."""
    pass

class CompletionFormatError(POIGeneratorError, ValueError):
    """Raised when the completion payload lacks choices[0].message.content."""
    pass

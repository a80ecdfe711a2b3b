class InvalidBuildIdError(ValueError):
    """Raised when a build id cannot be parsed."""

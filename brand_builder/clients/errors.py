class GenerationError(RuntimeError):
    """A generate call failed: network, service, auth, or unusable response."""

"""
backend/scorecast/errors.py

Purpose:
    Exception taxonomy for external data sources. Adapters raise these
    internally; they are converted into failed SourceResult values at the
    adapter boundary and never reach aggregation callers.
"""


class ProviderError(Exception):
    """Base class for every data-source failure."""

    kind = "provider_error"

    def __init__(self, source: str, message: str):
        super().__init__(f"[{source}] {message}")
        self.source = source
        self.message = message


class ConfigurationError(ProviderError):
    """Provider credential or endpoint is not configured."""

    kind = "configuration"


class TransportError(ProviderError):
    """Network failure, timeout or non-success HTTP status."""

    kind = "transport"

    def __init__(self, source: str, message: str, status_code: int | None = None):
        super().__init__(source, message)
        self.status_code = status_code


class ShapeError(ProviderError):
    """Response body does not match the expected structure."""

    kind = "shape"


class GenerationError(ProviderError):
    """Generative model returned nothing usable."""

    kind = "generation"

class CatalogConfigurationError(RuntimeError):
    """Raised when the catalog source cannot be called (missing credential)."""
    pass


class CatalogUpstreamError(RuntimeError):
    """Raised when the catalog source fails (non-2xx status, network errors, bad body)."""
    pass


class LocalCatalogError(RuntimeError):
    """Raised when the local retrieval endpoint answers with an error."""
    pass

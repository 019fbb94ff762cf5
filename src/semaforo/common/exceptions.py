class SemaforoError(Exception):
    """Base exception for all semaforo errors."""
    pass

class PersistenceError(SemaforoError):
    """Raised when the backing store is unreachable or rejects a query."""
    pass

class ValidationError(SemaforoError):
    """Raised when caller input is malformed (identity, field names)."""
    pass

class ConfigurationError(SemaforoError):
    """Raised when configuration is invalid."""
    pass

"""TableSift exceptions."""


class DataTableError(Exception):
    """Base exception for data table errors."""


class ConfigurationError(DataTableError):
    """Raised when adapter, column or table configuration is invalid."""


class InvalidRequestError(DataTableError):
    """Raised when DataTables request parameters cannot be interpreted."""


class MissingDependencyError(DataTableError):
    """Raised when an optional library is required but not installed.

    The message carries the install hint, e.g.
    ``Install elasticsearch to use the ElasticsearchAdapter``.
    """


class DateTimeParseError(DataTableError, ValueError):
    """Raised when a value cannot be interpreted as a date/time."""


class AdapterNotFoundError(DataTableError):
    """Raised when a requested adapter is not registered."""

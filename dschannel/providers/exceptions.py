"""Custom exceptions for the data source channel layer."""


class DataSourcePluginException(RuntimeError):
    """A driver, connection or catalog failure inside a channel operation.

    ``message`` names the operation that failed; ``cause`` keeps the
    original exception for diagnostics.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        self.message = message
        self.cause = cause
        if cause is not None:
            super().__init__(f"{message}: {cause}")
        else:
            super().__init__(message)


class MissingParameterError(ValueError):
    """Exception raised when a required connection parameter is absent."""

    def __init__(self, key: str, message: str | None = None):
        self.key = key
        super().__init__(message or f"Connection parameter '{key}' is required")


class MissingDriverError(ImportError):
    """Exception raised when the configured driver module cannot be imported."""

    def __init__(
        self,
        driver_name: str,
        *,
        module_name: str | None = None,
        import_error: str | None = None,
    ):
        self.driver_name = driver_name
        self.module_name = module_name
        self.import_error = import_error
        detail = f" ({import_error})" if import_error else ""
        super().__init__(f"Missing driver for {driver_name}{detail}")


class UnknownPluginError(ValueError):
    """Exception raised when no channel is registered for a plugin name."""

    def __init__(self, plugin_name: str, supported: list[str] | None = None):
        self.plugin_name = plugin_name
        available = f". Available: {', '.join(supported)}" if supported else ""
        super().__init__(f"Unknown data source plugin: {plugin_name}{available}")

"""
Custom exception classes for Moonshot Export.

Every failure that ends an export is raised as an ExportError subclass
so the command line can report it with a distinct message and exit code.
"""


class ExportError(Exception):
    """Base exception for export errors."""

    def __init__(
        self,
        detail: str,
        error_code: str = "EXPORT_ERROR",
        exit_code: int = 1
    ):
        self.detail = detail
        self.error_code = error_code
        self.exit_code = exit_code
        super().__init__(detail)


class RecordNotFoundError(ExportError):
    """Exception raised when no stored request matches the selector."""

    def __init__(self, kind: str, value: object):
        self.kind = kind
        self.value = value
        super().__init__(
            detail=f"request with {kind}={value} not found",
            error_code="RECORD_NOT_FOUND",
            exit_code=3
        )


class StorageError(ExportError):
    """Exception raised when the request store cannot be read."""

    def __init__(self, detail: str = "Database error occurred"):
        super().__init__(
            detail=detail,
            error_code="DATABASE_ERROR",
            exit_code=4
        )


class RenderError(ExportError):
    """Exception raised when a record cannot be rendered."""

    def __init__(self, detail: str):
        super().__init__(
            detail=detail,
            error_code="RENDER_ERROR",
            exit_code=5
        )


class OutputError(ExportError):
    """Exception raised when the output sink cannot be opened or written."""

    def __init__(self, detail: str):
        super().__init__(
            detail=detail,
            error_code="OUTPUT_ERROR",
            exit_code=6
        )

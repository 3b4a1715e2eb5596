"""Domain errors raised by the engines, the program store and the routes.

Each error carries a stable machine-readable ``code``; the HTTP status is
decided by ``core.error_handlers``.
"""


def _code_segment(name: str) -> str:
    return name.strip().replace(" ", "_").replace("-", "_").upper()


class DomainError(Exception):
    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class NotFoundError(DomainError):
    """An exercise, muscle, week or stored program that does not exist."""

    def __init__(self, entity: str, message: str | None = None, details: dict | None = None):
        self.entity = entity
        super().__init__(f"NF_{_code_segment(entity)}_001", message or f"{entity} not found", details)


class ValidationError(DomainError):
    """Input that is well-formed but unusable, e.g. a locked field in an override."""

    def __init__(self, field: str, message: str, details: dict | None = None):
        self.field = field
        super().__init__(
            f"VAL_{_code_segment(field)}_001",
            f"Validation failed for {field}: {message}",
            details or {"field": field},
        )


class BusinessRuleError(DomainError):
    """Valid input the planner cannot honour, e.g. no template for a day count."""

    def __init__(self, message: str, code: str = "BR_001", details: dict | None = None):
        super().__init__(code, message, details)


class ConflictError(DomainError):
    def __init__(self, message: str, code: str = "CF_001", details: dict | None = None):
        super().__init__(code, message, details)


class StorageError(DomainError):
    """The program store could not be read or written."""

    def __init__(self, message: str, code: str = "ST_001", details: dict | None = None):
        super().__init__(code, message, details)

"""HTTP middleware."""
from mesoplan.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]

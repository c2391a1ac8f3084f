from typing import Any, Optional

class AppError(Exception):
    """Base for errors that reach the client as ``{"error": code, "message": ...}``."""

    status_code: int = 400
    code: str = "APP_ERROR"

    def __init__(self, message: str, *, code: Optional[str] = None, status_code: Optional[int] = None,
                 details: Any = None):
        super().__init__(message)
        if code:
            self.code = code
        if status_code:
            self.status_code = status_code
        self.message = message
        self.details = details

    def to_payload(self) -> dict:
        payload = {"error": self.code, "message": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload

# Filters or a quick-filter name that cannot become a listings URL.
class MappingError(AppError):
    code = "MAPPING_ERROR"
    status_code = 400

class ValidationFailure(AppError):
    code = "VALIDATION_FAILURE"
    status_code = 422

# Nominatim or any other upstream we depend on.
class ExternalServiceError(AppError):
    code = "EXTERNAL_SERVICE_ERROR"
    status_code = 502

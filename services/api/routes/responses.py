from shared.schemas.base import ErrorEnvelope

# Documented failure responses shared by every protected route
PROTECTED_RESPONSES = {
    400: {"model": ErrorEnvelope, "description": "Request validation failed"},
    401: {"model": ErrorEnvelope, "description": "Missing or invalid X-API-KEY header"},
    413: {"model": ErrorEnvelope, "description": "Request body too large"},
    429: {"model": ErrorEnvelope, "description": "Rate limit exceeded"},
    500: {"model": ErrorEnvelope, "description": "Provider or internal failure"},
}

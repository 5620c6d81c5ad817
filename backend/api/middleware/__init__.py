"""API Middleware Package"""

from .error_handler import available_endpoints, get_status_code, setup_error_handlers

__all__ = [
    "available_endpoints",
    "get_status_code",
    "setup_error_handlers",
]

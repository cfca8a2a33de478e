"""API middleware for error handling and cross-cutting concerns."""

from interfaces.api.middleware.error_handler import handle_service_errors

__all__ = ["handle_service_errors"]

"""Shared helpers for API routers."""

from .error_handling import handle_store_errors, request_validation_exception_handler

__all__ = ["handle_store_errors", "request_validation_exception_handler"]

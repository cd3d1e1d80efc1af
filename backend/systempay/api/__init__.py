"""FastAPI helpers for gateway callbacks."""
from .callbacks import (
    read_form_fields,
    register_exception_handlers,
    systempay_error_handler,
    verify_request,
)

__all__ = [
    "read_form_fields",
    "register_exception_handlers",
    "systempay_error_handler",
    "verify_request",
]

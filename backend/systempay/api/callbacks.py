"""
Gateway Callback Helpers for FastAPI

Reads the form-encoded body the gateway POSTs back and maps Systempay errors
to JSON responses. Routes are left to the application.

Usage:
    app = FastAPI()
    register_exception_handlers(app)

    @app.post("/payment/systempay/notify")
    async def notify(request: Request):
        result = await verify_request(request, context)
        ...
"""
from typing import Dict
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..exceptions import ConfigurationError, SystempayError
from ..models.signing import SigningContext, VerificationResult
from ..services.signature_service import verify_response

logger = logging.getLogger(__name__)


async def read_form_fields(request: Request) -> Dict[str, str]:
    """Parse a form-encoded request body into a plain field mapping."""
    form = await request.form()
    return {name: str(value) for name, value in form.items()}


async def verify_request(request: Request, context: SigningContext) -> VerificationResult:
    """
    Verify the signature of a gateway callback request.

    Raises:
        SignatureMissingError: No signature field posted
        SignatureMismatchError: Posted signature does not match
    """
    fields = await read_form_fields(request)
    return verify_response(fields, context)


async def systempay_error_handler(request: Request, exc: SystempayError) -> JSONResponse:
    """
    Handle Systempay errors with standardized response format.

    Configuration errors are server faults (500); every other error means the
    request could not be trusted or used (400).
    """
    logger.warning(
        f"Systempay error: {exc.error_code} - {exc.message}",
        extra={"details": exc.details}
    )

    status_code = 500 if isinstance(exc, ConfigurationError) else 400
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SystempayError, systempay_error_handler)

import logging

from dependency_injector.wiring import inject, Provide
from fastapi import Request
from starlette.responses import JSONResponse

from wp_assets.dependency_injection.container import Container
from wp_assets.exceptions.asset_exceptions import AssetBaseException

log = logging.getLogger(__name__)


def handle_json_exception(
    error: str,
    error_description: str,
    status_code: int,
) -> JSONResponse:
    return JSONResponse(
        content={"error": error, "error_description": error_description},
        status_code=status_code,
    )


@inject
async def general_exception_handler(
    request: Request,
    exception: Exception,
    include_log_message_in_error_response: bool = Provide[
        Container.services.include_log_message_in_error_response
    ],
) -> JSONResponse:
    if isinstance(exception, AssetBaseException):
        error = exception.error
        error_description = exception.error_description
        status_code = exception.status_code
        if include_log_message_in_error_response and exception.log_message is not None:
            error_description = f"{error_description} ({exception.log_message})"
        log.warning(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exception.log_message or error_description,
        )
    else:
        log.exception("Unhandled exception", exc_info=exception)
        error = "server_error"
        error_description = "Something went wrong"
        status_code = 500
    return handle_json_exception(error, error_description, status_code)

"""
Request middleware. The fault interceptor is the outermost boundary: any
exception that escapes a route becomes a 500 with a JSON error body.
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from contract_api.error_handler import ErrorHandler


def install_fault_interceptor(app: FastAPI, handler: Optional[ErrorHandler] = None) -> None:
    handler = handler or ErrorHandler()

    @app.middleware("http")
    async def fault_interceptor(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            payload = handler.handle_exception(exc, context={"method": request.method, "path": request.url.path})
            return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)

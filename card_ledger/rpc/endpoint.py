"""HTTP transport for the procedure registry: POST {RPC_PREFIX}/{procedure}."""

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from .. import responses
from ..errors import ErrorKind, ValidationError, describe_error
from ..logger import get_logger
from ..services import Services
from ..routers.deps import get_services
from .procedures import ProcedureRouter

logger = get_logger("rpc")

RPC_ERROR_CODES = {
    ErrorKind.VALIDATION: ("BAD_REQUEST", 400),
    ErrorKind.NOT_FOUND: ("NOT_FOUND", 404),
    ErrorKind.CONFLICT: ("CONFLICT", 409),
    ErrorKind.INTERNAL: ("INTERNAL_SERVER_ERROR", 500),
}


def rpc_error_response(procedure_name: str, exc: Exception) -> JSONResponse:
    """The one place RPC failures are translated into responses"""
    description = describe_error(exc)
    if description.kind is ErrorKind.INTERNAL:
        logger.error("Procedure %s failed", procedure_name, exc_info=exc)

    code, status_code = RPC_ERROR_CODES[description.kind]
    body = responses.failure(description.message, description.details)
    body["code"] = code
    return JSONResponse(status_code=status_code, content=body)


def build_rpc_router(procedures: ProcedureRouter) -> APIRouter:
    router = APIRouter()

    @router.post("/{procedure_name}")
    async def call_procedure(procedure_name: str, request: Request, services: Services = Depends(get_services)):
        """Run a procedure with the JSON request body as its input"""
        try:
            payload = None
            if (await request.body()).strip():
                try:
                    payload = await request.json()
                except ValueError:
                    raise ValidationError("Request body must be valid JSON")

            result = await run_in_threadpool(procedures.call, procedure_name, payload, services)
        except Exception as exc:
            return rpc_error_response(procedure_name, exc)

        return JSONResponse(content=responses.success(result))

    return router

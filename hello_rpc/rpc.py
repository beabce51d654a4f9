from pydantic import ValidationError
from loguru import logger

from hello_rpc.errors import INVALID_PARAMS, MESSAGES, METHOD_NOT_FOUND
from hello_rpc.methods import METHODS
from hello_rpc.models import (
    ErrorResponse,
    JSONRPCError,
    JSONRPCRequest,
    RPCResponse,
    SuccessResponse,
)

def error_response(req: JSONRPCRequest, code: int) -> ErrorResponse:
    return ErrorResponse(
        error=JSONRPCError(code=code, message=MESSAGES[code]),
        id=req.id,
        jsonrpc=req.jsonrpc,
    )

def handle_jsonrpc(req: JSONRPCRequest) -> RPCResponse:
    """
    Dispatch a decoded request to its registered method.
    Supported methods are whatever hello_rpc.methods registered, currently:
      - greeting -> params: { name }
    Unknown methods and rejected params come back as error envelopes;
    this never raises for a decoded request.
    """
    handler = METHODS.get(req.method)
    if handler is None:
        logger.info("Method not found: {!r}", req.method)
        return error_response(req, METHOD_NOT_FOUND)
    try:
        result = handler(req.params)
    except ValidationError as e:
        logger.info("Invalid params for {}: {}", req.method, e.error_count())
        return error_response(req, INVALID_PARAMS)
    return SuccessResponse(id=req.id, jsonrpc=req.jsonrpc, result=result)

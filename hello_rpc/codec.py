from pydantic import ValidationError

from hello_rpc.errors import MalformedRequest
from hello_rpc.models import JSONRPCRequest, RPCResponse

def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)

def decode_request(body: bytes) -> JSONRPCRequest:
    """
    Parse a raw request body into a JSONRPCRequest.
    Raises MalformedRequest for invalid JSON, a non-object body,
    or a missing/mistyped id, jsonrpc, method or params.
    """
    try:
        return JSONRPCRequest.model_validate_json(body)
    except ValidationError as e:
        raise MalformedRequest(_describe(e)) from e

def encode_response(response: RPCResponse) -> bytes:
    return response.model_dump_json().encode("utf-8")

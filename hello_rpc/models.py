from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, Union

# JSON-RPC envelopes. Field order here is the wire order.
class JSONRPCRequest(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    id: str
    jsonrpc: str
    method: str
    params: Dict[str, Any]

class JSONRPCError(BaseModel):
    code: int
    message: str

class SuccessResponse(BaseModel):
    id: str
    jsonrpc: str
    result: Any

class ErrorResponse(BaseModel):
    error: JSONRPCError
    id: str
    jsonrpc: str

RPCResponse = Union[SuccessResponse, ErrorResponse]

# greeting method shapes
class GreetingParams(BaseModel):
    model_config = ConfigDict(strict=True)

    name: str

class GreetingResult(BaseModel):
    greeting: str

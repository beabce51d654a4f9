# JSON-RPC 2.0 error codes
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602

MESSAGES = {
    METHOD_NOT_FOUND: "Method not found",
    INVALID_PARAMS: "Invalid params",
}


class MalformedRequest(ValueError):
    """
    The request body could not be decoded into a JSON-RPC envelope:
    bad JSON, not an object, or a missing/mistyped top-level field.
    """

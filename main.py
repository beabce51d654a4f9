import sys
import time

import uvicorn
from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from loguru import logger

from hello_rpc.codec import decode_request, encode_response
from hello_rpc.config import settings
from hello_rpc.errors import MalformedRequest
from hello_rpc.rpc import handle_jsonrpc

app = FastAPI(title="Saying Hello - JSON-RPC server")

def is_json_content_type(value: str) -> bool:
    mime = value.split(";", 1)[0].strip().lower()
    _, slash, subtype = mime.partition("/")
    return bool(slash) and (subtype == "json" or subtype.endswith("+json"))

async def read_limited(req: Request, limit: int) -> bytes:
    body = bytearray()
    async for chunk in req.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise HTTPException(status_code=413, detail=f"Payload larger than {limit} bytes")
    return bytes(body)

@app.middleware("http")
async def access_log(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("{} {} -> {} ({:.1f} ms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response

@app.exception_handler(MalformedRequest)
async def malformed_request(request: Request, exc: MalformedRequest):
    logger.warning("Rejected malformed JSON-RPC body: {}", exc)
    return JSONResponse(status_code=400, content={"detail": f"Malformed JSON-RPC request: {exc}"})

@app.post("/")
async def jsonrpc(req: Request):
    """
    Single JSON-RPC endpoint.
    Success and method errors are both HTTP 200; the body says which.
    """
    if not is_json_content_type(req.headers.get("content-type", "")):
        raise HTTPException(status_code=400, detail="Content type error: expected application/json")

    declared = req.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > settings.max_body_size:
        raise HTTPException(status_code=413, detail=f"Payload larger than {settings.max_body_size} bytes")
    body = await read_limited(req, settings.max_body_size)

    rpc = decode_request(body)
    resp = handle_jsonrpc(rpc)
    return Response(content=encode_response(resp), media_type="application/json")

def configure_logging(level: str):
    logger.remove()
    logger.add(sys.stderr, level=level.upper())

def run():
    configure_logging(settings.log_level)
    logger.info("starting HTTP server at http://{}:{}", settings.host, settings.port)
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.reload, log_level=settings.log_level.lower())

if __name__ == "__main__":
    run()

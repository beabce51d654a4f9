"""Saying Hello: a single-endpoint JSON-RPC server."""

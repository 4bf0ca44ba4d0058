"""Request repair for OpenAI chat completion calls: function parameter schemas."""

from __future__ import annotations

import json
from typing import Any

import httpx


def _fix_tools(tools: Any) -> None:
    if not isinstance(tools, list):
        return
    for tool in tools:
        if not isinstance(tool, dict):
            continue
        function = tool.get("function")
        if not isinstance(function, dict):
            continue
        parameters = function.get("parameters")
        if not isinstance(parameters, dict) or parameters.get("type") != "object":
            continue
        properties = parameters.get("properties")
        if properties is None or (isinstance(properties, dict) and not properties):
            parameters["properties"] = {}


def fix_request_body(body: bytes) -> bytes:
    """Return the body with object parameter schemas given a properties map.

    A body that is not a JSON object is returned unchanged.
    """
    try:
        data = json.loads(body)
    except ValueError:
        return body
    if not isinstance(data, dict):
        return body
    _fix_tools(data.get("tools"))
    return json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode(
        "utf-8"
    )


def _with_body(request: httpx.Request, body: bytes) -> httpx.Request:
    headers = httpx.Headers(request.headers)
    headers.pop("content-length", None)
    headers["Content-Length"] = str(len(body))
    return httpx.Request(
        request.method,
        request.url,
        headers=headers,
        content=body,
        extensions=request.extensions,
    )


class OpenAIFixTransport(httpx.BaseTransport):
    """Transport that repairs chat completion requests before sending them."""

    def __init__(self, wrapped: httpx.BaseTransport | None = None) -> None:
        self._wrapped = wrapped if wrapped is not None else httpx.HTTPTransport()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        if "/chat/completions" not in request.url.path:
            return self._wrapped.handle_request(request)
        body = request.read()
        fixed = fix_request_body(body)
        if fixed is body:
            return self._wrapped.handle_request(request)
        return self._wrapped.handle_request(_with_body(request, fixed))

    def close(self) -> None:
        self._wrapped.close()
"""Request repair for Anthropic API calls: tool schemas and tool_use inputs."""

from __future__ import annotations

import json
from typing import Any

import httpx

_REPLACEMENTS = (
    ('"input":,"name"', '"input":{},"name"'),
    ('"input":,"type"', '"input":{},"type"'),
    ('"input":}', '"input":{}}'),
    ('"arguments":,"name"', '"arguments":"{}","name"'),
    ('"arguments":,"type"', '"arguments":"{}","type"'),
    ('"arguments":}', '"arguments":"{}"'),
    ('"input":,', '"input":{}'),
    ('"arguments":,', '"arguments":"{}"'),
)


def _is_json(text: str) -> bool:
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


def _fix_tools(tools: Any) -> None:
    if not isinstance(tools, list):
        return
    for tool in tools:
        if not isinstance(tool, dict):
            continue
        schema = tool.get("input_schema")
        if not isinstance(schema, dict):
            continue
        properties = schema.get("properties")
        if properties is None:
            schema["properties"] = {}
        elif isinstance(properties, dict):
            for prop in properties.values():
                if isinstance(prop, dict) and "type" not in prop:
                    prop["type"] = "string"


def _fix_tool_use(item: dict[str, Any]) -> None:
    if "input" not in item or item["input"] is None:
        item["input"] = {}
        return
    value = item["input"]
    if isinstance(value, str):
        if value in ("", "{}") or not _is_json(value):
            item["input"] = {}


def _fix_messages(messages: Any) -> None:
    if not isinstance(messages, list):
        return
    for message in messages:
        if not isinstance(message, dict):
            continue
        content = message.get("content")
        if not isinstance(content, list):
            continue
        for item in content:
            if isinstance(item, dict) and item.get("type") == "tool_use":
                _fix_tool_use(item)


def fix_request_body(body: bytes) -> bytes:
    """Return the request body with malformed tool data repaired.

    A body that cannot be parsed even after textual repair is returned unchanged.
    """
    text = body.decode("utf-8", errors="replace")
    for old, new in _REPLACEMENTS:
        text = text.replace(old, new)
    try:
        data = json.loads(text)
    except ValueError:
        return body
    if not isinstance(data, dict):
        return body
    _fix_tools(data.get("tools"))
    _fix_messages(data.get("messages"))
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


class AnthropicFixTransport(httpx.BaseTransport):
    """Transport that repairs requests bound for anthropic.com before sending them."""

    def __init__(self, wrapped: httpx.BaseTransport | None = None) -> None:
        self._wrapped = wrapped if wrapped is not None else httpx.HTTPTransport()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        if "anthropic.com" not in request.url.host:
            return self._wrapped.handle_request(request)
        body = request.read()
        return self._wrapped.handle_request(_with_body(request, fix_request_body(body)))

    def close(self) -> None:
        self._wrapped.close()
import json

import httpx

from llmcatalog.openai_fix import OpenAIFixTransport, fix_request_body


def _tools(parameters):
    return {"model": "gpt-4o", "tools": [{"type": "function", "function": {
        "name": "search", "parameters": parameters}}]}


def _fix(data):
    return json.loads(fix_request_body(json.dumps(data).encode()))


def _params(result):
    return result["tools"][0]["function"]["parameters"]


def test_missing_properties_added():
    assert _params(_fix(_tools({"type": "object"})))["properties"] == {}


def test_null_properties_replaced():
    assert _params(_fix(_tools({"type": "object", "properties": None})))["properties"] == {}


def test_existing_properties_kept():
    params = {"type": "object", "properties": {"q": {"type": "string"}}}
    assert _params(_fix(_tools(params))) == params


def test_non_object_schema_untouched():
    assert _params(_fix(_tools({"type": "string"}))) == {"type": "string"}


def test_round_trip_without_tools():
    data = {"model": "gpt-4o", "messages": [{"role": "user", "content": "hi"}]}
    assert _fix(data) == data


def test_invalid_body_unchanged():
    body = b"{broken"
    assert fix_request_body(body) == body


def _recording_transport(seen):
    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    return httpx.MockTransport(handler)


def test_transport_fixes_chat_completions():
    seen = []
    client = httpx.Client(transport=OpenAIFixTransport(_recording_transport(seen)))
    response = client.post(
        "https://api.example.com/v1/chat/completions", json=_tools({"type": "object"})
    )
    assert response.status_code == 200
    sent = seen[0]
    assert _params(json.loads(sent.content))["properties"] == {}
    assert sent.headers["content-length"] == str(len(sent.content))


def test_transport_passes_other_paths_through():
    seen = []
    client = httpx.Client(transport=OpenAIFixTransport(_recording_transport(seen)))
    payload = _tools({"type": "object"})
    client.post("https://api.example.com/v1/embeddings", json=payload)
    assert json.loads(seen[0].content) == payload


def test_transport_passes_invalid_body_through():
    seen = []
    client = httpx.Client(transport=OpenAIFixTransport(_recording_transport(seen)))
    client.post("https://api.example.com/v1/chat/completions", content=b"{broken")
    assert seen[0].content == b"{broken"
# llmcatalog

A static catalogue of large-language-model providers and their models, a
registry that validates model choices and credentials against it, and `httpx`
transports that repair malformed tool data in chat request bodies before they
are sent.

## Installation

```
pip install llmcatalog
```

## The catalogue

`llmcatalog.catalog` defines four frozen dataclasses:

- `Cost` – price per million tokens: `input`, `output`, and optional
  `cache_read` and `cache_write` (`None` when not offered).
- `Limit` – `context` window and maximum `output` tokens.
- `ModelInfo` – `id`, `name`, the flags `attachment`, `reasoning` and
  `temperature`, plus a `cost` and a `limit`.
- `ProviderInfo` – `id`, `name`, `npm` (the SDK package name), `env` (a tuple
  of environment variable names that carry its credentials) and `models`, a
  dictionary of model id to `ModelInfo`.

Each has `from_dict(data)` and `to_dict()` for conversion to and from plain
dictionaries; `Cost.to_dict()` leaves out cache prices that are `None`.

The catalogue covers these providers: `amazon-bedrock`, `anthropic`, `azure`,
`deepseek`, `github-copilot`, `google`, `google-vertex`, `groq`, `llama`,
`mistral`, `morph`, `openai`, `openrouter`, `vercel` and `xai`.

`llmcatalog.registry.get_models_data()` returns the whole catalogue as a
dictionary of provider id to `ProviderInfo`, ordered by provider id.

## Validating models and environments

```python
from llmcatalog.registry import RegistryError, get_global_registry

registry = get_global_registry()

info = registry.validate_model("anthropic", "claude-sonnet-4-20250514")
print(info.name, info.limit.context)

try:
    registry.validate_model("openai", "gpt-4x")
except RegistryError as exc:
    print(exc)  # model gpt-4x not found for provider openai
    print("Did you mean:", registry.suggest_models("openai", "gpt-4x"))

# Raises RegistryError unless an API key is given or one of the
# provider's environment variables is set to a non-empty value.
registry.validate_environment("openai", api_key="placeholder")

print(registry.get_supported_providers())
print(registry.get_required_env_vars("google"))
print(sorted(registry.get_models_for_provider("mistral")))
```

`ModelsRegistry(providers)` builds a registry over any mapping of provider id
to `ProviderInfo`; with no argument it uses the full catalogue.
`get_global_registry()` returns one shared registry over the catalogue.

- `validate_model`, `get_required_env_vars` and `get_models_for_provider`
  raise `RegistryError` (a `ValueError`) with `unsupported provider: <id>` for
  an unknown provider.
- `suggest_models(provider, invalid_model)` returns at most five model ids
  whose id or name contains the given text (case-insensitively), or whose id's
  first dash-separated part occurs in it; it returns an empty list for an
  unknown provider.

## Request-repairing transports

Some clients produce tool schemas without `properties`, or tool calls with
empty or invalid inputs. The transports wrap another `httpx.BaseTransport`
(an `httpx.HTTPTransport` by default) and repair the JSON body before
forwarding it.

```python
import httpx
from llmcatalog.anthropic_fix import AnthropicFixTransport
from llmcatalog.openai_fix import OpenAIFixTransport

anthropic_client = httpx.Client(transport=AnthropicFixTransport(httpx.HTTPTransport()))
openai_client = httpx.Client(transport=OpenAIFixTransport(httpx.HTTPTransport()))
```

`AnthropicFixTransport` only touches requests whose host contains
`anthropic.com`. It first patches textual patterns such as `"input":,` and
`"arguments":}`, then gives every tool `input_schema` a `properties` object,
gives each property without a `type` the type `"string"`, and replaces missing,
`null`, empty or non-JSON string `input` values of `tool_use` content with `{}`.

`OpenAIFixTransport` only touches requests whose path contains
`/chat/completions`. It gives every function `parameters` schema of type
`"object"` a `properties` object where it is missing or `null`.

Both modules also expose `fix_request_body(body)`, which works on raw bytes.
A repaired body is re-serialised as compact JSON with sorted keys, and the
`Content-Length` header is updated. A body that cannot be parsed as a JSON
object is passed on unchanged.

## What this package does not do

It does not call any model: there is no chat client, no streaming and no
tool-calling loop, only the transports that can be plugged into an `httpx`
client you build yourself. The catalogue is fixed in the package; nothing
fetches or refreshes it.
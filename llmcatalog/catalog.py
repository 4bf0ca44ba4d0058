"""Model catalogue record types and a first set of provider entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Cost:
    """Pricing of a model, per million tokens."""

    input: float = 0.0
    output: float = 0.0
    cache_read: float | None = None
    cache_write: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Cost":
        cache_read = data.get("cache_read")
        cache_write = data.get("cache_write")
        return cls(
            input=float(data.get("input", 0.0)),
            output=float(data.get("output", 0.0)),
            cache_read=None if cache_read is None else float(cache_read),
            cache_write=None if cache_write is None else float(cache_write),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"input": self.input, "output": self.output}
        if self.cache_read is not None:
            result["cache_read"] = self.cache_read
        if self.cache_write is not None:
            result["cache_write"] = self.cache_write
        return result


@dataclass(frozen=True)
class Limit:
    """Context window and output token limits of a model."""

    context: int = 0
    output: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Limit":
        return cls(context=int(data.get("context", 0)), output=int(data.get("output", 0)))

    def to_dict(self) -> dict[str, Any]:
        return {"context": self.context, "output": self.output}


@dataclass(frozen=True)
class ModelInfo:
    """Description of a single model offered by a provider."""

    id: str = ""
    name: str = ""
    attachment: bool = False
    reasoning: bool = False
    temperature: bool = False
    cost: Cost = field(default_factory=Cost)
    limit: Limit = field(default_factory=Limit)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ModelInfo":
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            attachment=bool(data.get("attachment", False)),
            reasoning=bool(data.get("reasoning", False)),
            temperature=bool(data.get("temperature", False)),
            cost=Cost.from_dict(data.get("cost") or {}),
            limit=Limit.from_dict(data.get("limit") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "attachment": self.attachment,
            "reasoning": self.reasoning,
            "temperature": self.temperature,
            "cost": self.cost.to_dict(),
            "limit": self.limit.to_dict(),
        }


@dataclass(frozen=True)
class ProviderInfo:
    """A model provider, the environment variables it reads and its models."""

    id: str = ""
    env: tuple[str, ...] = ()
    npm: str = ""
    name: str = ""
    models: dict[str, ModelInfo] = field(default_factory=dict, hash=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProviderInfo":
        models = data.get("models") or {}
        return cls(
            id=str(data.get("id", "")),
            env=tuple(data.get("env") or ()),
            npm=str(data.get("npm", "")),
            name=str(data.get("name", "")),
            models={key: ModelInfo.from_dict(value) for key, value in models.items()},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "env": list(self.env),
            "npm": self.npm,
            "name": self.name,
            "models": {key: model.to_dict() for key, model in self.models.items()},
        }


def _model(
    model_id: str,
    name: str,
    attachment: bool,
    reasoning: bool,
    temperature: bool,
    cost: tuple[float, float, float | None, float | None],
    limit: tuple[int, int],
) -> ModelInfo:
    cost_in, cost_out, cache_read, cache_write = cost
    return ModelInfo(
        id=model_id,
        name=name,
        attachment=attachment,
        reasoning=reasoning,
        temperature=temperature,
        cost=Cost(float(cost_in), float(cost_out), cache_read, cache_write),
        limit=Limit(*limit),
    )


def _provider(
    provider_id: str, env: tuple[str, ...], npm: str, name: str, models: list[ModelInfo]
) -> ProviderInfo:
    return ProviderInfo(
        id=provider_id,
        env=env,
        npm=npm,
        name=name,
        models={model.id: model for model in models},
    )


_COMPATIBLE = "@ai-sdk/openai-compatible"
_FREE = (0, 0, None, None)


def providers() -> dict[str, ProviderInfo]:
    """Return the DeepSeek, Llama, Morph and Vercel provider entries."""
    llama_models = [
        ("cerebras-llama-4-maverick-17b-128e-instruct", "Cerebras-Llama-4-Maverick-17B-128E-Instruct"),
        ("cerebras-llama-4-scout-17b-16e-instruct", "Cerebras-Llama-4-Scout-17B-16E-Instruct"),
        ("groq-llama-4-maverick-17b-128e-instruct", "Groq-Llama-4-Maverick-17B-128E-Instruct"),
        ("llama-3.3-70b-instruct", "Llama-3.3-70B-Instruct"),
        ("llama-3.3-8b-instruct", "Llama-3.3-8B-Instruct"),
        ("llama-4-maverick-17b-128e-instruct-fp8", "Llama-4-Maverick-17B-128E-Instruct-FP8"),
        ("llama-4-scout-17b-16e-instruct-fp8", "Llama-4-Scout-17B-16E-Instruct-FP8"),
    ]
    entries = [
        _provider(
            "deepseek",
            ("DEEPSEEK_API_KEY",),
            _COMPATIBLE,
            "DeepSeek",
            [
                _model("deepseek-chat", "DeepSeek Chat", True, True, True,
                       (0.27, 1.1, 0.07, None), (65536, 8192)),
                _model("deepseek-reasoner", "DeepSeek Reasoner", True, True, True,
                       (0.55, 2.19, 0.14, None), (65536, 8192)),
            ],
        ),
        _provider(
            "llama",
            ("LLAMA_API_KEY",),
            _COMPATIBLE,
            "Llama",
            [
                _model(model_id, name, True, False, True, _FREE, (128000, 4096))
                for model_id, name in llama_models
            ],
        ),
        _provider(
            "morph",
            ("MORPH_API_KEY",),
            _COMPATIBLE,
            "Morph",
            [
                _model("auto", "Auto", False, False, False,
                       (0.85, 1.55, None, None), (32000, 32000)),
                _model("morph-v3-fast", "Morph v3 Fast", False, False, False,
                       (0.8, 1.2, None, None), (16000, 16000)),
                _model("morph-v3-large", "Morph v3 Large", False, False, False,
                       (0.9, 1.9, None, None), (32000, 32000)),
            ],
        ),
        _provider(
            "vercel",
            ("V0_API_KEY",),
            "@ai-sdk/vercel",
            "Vercel",
            [
                _model("v0-1.0-md", "v0-1.0-md", True, True, True,
                       (3, 15, None, None), (128000, 32000)),
                _model("v0-1.5-lg", "v0-1.5-lg", True, True, True,
                       (15, 75, None, None), (512000, 32000)),
                _model("v0-1.5-md", "v0-1.5-md", True, True, True,
                       (3, 15, None, None), (128000, 32000)),
            ],
        ),
    ]
    return {entry.id: entry for entry in entries}
"""Lookup and validation over the static model catalogue."""

from __future__ import annotations

import os
from typing import Mapping

from . import catalog, providers_a, providers_b, providers_c, providers_d
from .catalog import ModelInfo, ProviderInfo

_MAX_SUGGESTIONS = 5


class RegistryError(ValueError):
    """Raised when a provider or model is unknown or its environment is incomplete."""


def get_models_data() -> dict[str, ProviderInfo]:
    """Return every provider entry of the catalogue, keyed by provider id."""
    merged: dict[str, ProviderInfo] = {}
    for source in (catalog, providers_a, providers_b, providers_c, providers_d):
        merged.update(source.providers())
    return dict(sorted(merged.items()))


class ModelsRegistry:
    """Validation of providers and models and information about them."""

    def __init__(self, providers: Mapping[str, ProviderInfo] | None = None) -> None:
        self._providers: dict[str, ProviderInfo] = (
            get_models_data() if providers is None else dict(providers)
        )

    def _provider(self, provider: str) -> ProviderInfo:
        try:
            return self._providers[provider]
        except KeyError:
            raise RegistryError(f"unsupported provider: {provider}") from None

    def validate_model(self, provider: str, model_id: str) -> ModelInfo:
        """Return the model's information, raising if provider or model is unknown."""
        info = self._provider(provider)
        try:
            return info.models[model_id]
        except KeyError:
            raise RegistryError(
                f"model {model_id} not found for provider {provider}"
            ) from None

    def get_required_env_vars(self, provider: str) -> list[str]:
        """Return the environment variables the provider reads its key from."""
        return list(self._provider(provider).env)

    def validate_environment(self, provider: str, api_key: str = "") -> None:
        """Raise unless an API key is given or one of the provider's variables is set."""
        env_vars = self.get_required_env_vars(provider)
        if api_key:
            return
        if not any(os.environ.get(name) for name in env_vars):
            raise RegistryError(
                f"missing required environment variables for {provider}: "
                f"{', '.join(env_vars)} (at least one required)"
            )

    def suggest_models(self, provider: str, invalid_model: str) -> list[str]:
        """Return up to five model ids resembling an unknown model name."""
        info = self._providers.get(provider)
        if info is None:
            return []
        wanted = invalid_model.lower()
        suggestions = [
            model_id
            for model_id, model in info.models.items()
            if wanted in model_id.lower()
            or wanted in model.name.lower()
            or model_id.split("-")[0].lower() in wanted
        ]
        return suggestions[:_MAX_SUGGESTIONS]

    def get_supported_providers(self) -> list[str]:
        """Return the ids of all known providers."""
        return list(self._providers)

    def get_models_for_provider(self, provider: str) -> dict[str, ModelInfo]:
        """Return all models of a provider, keyed by model id."""
        return dict(self._provider(provider).models)


_global_registry = ModelsRegistry()


def get_global_registry() -> ModelsRegistry:
    """Return the shared registry built from the static catalogue."""
    return _global_registry
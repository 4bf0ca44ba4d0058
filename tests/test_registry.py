import pytest

from llmcatalog.catalog import Cost, Limit, ModelInfo, ProviderInfo
from llmcatalog.registry import (
    ModelsRegistry,
    RegistryError,
    get_global_registry,
    get_models_data,
)

ALL_PROVIDERS = {
    "amazon-bedrock", "anthropic", "azure", "deepseek", "github-copilot", "google",
    "google-vertex", "groq", "llama", "mistral", "morph", "openai", "openrouter",
    "vercel", "xai",
}


@pytest.fixture
def registry():
    return ModelsRegistry()


def test_models_data_holds_every_provider():
    data = get_models_data()
    assert set(data) == ALL_PROVIDERS
    for provider_id, info in data.items():
        assert info.id == provider_id
        for model_id, model in info.models.items():
            assert model.id == model_id


def test_models_data_sorted_by_provider():
    keys = list(get_models_data())
    assert keys == sorted(keys)


def test_validate_model_known(registry):
    model = registry.validate_model("anthropic", "claude-sonnet-4-20250514")
    assert model.name == "Claude Sonnet 4"
    assert model.reasoning is True
    assert model.limit.output == 64000


def test_validate_model_unknown_provider(registry):
    with pytest.raises(RegistryError, match="unsupported provider: nope"):
        registry.validate_model("nope", "x")


def test_validate_model_unknown_model(registry):
    with pytest.raises(RegistryError, match="model missing not found for provider openai"):
        registry.validate_model("openai", "missing")


def test_required_env_vars(registry):
    assert registry.get_required_env_vars("google") == [
        "GOOGLE_API_KEY", "GEMINI_API_KEY", "GOOGLE_GENERATIVE_AI_API_KEY",
    ]
    with pytest.raises(RegistryError):
        registry.get_required_env_vars("nope")


def test_validate_environment_missing_then_set(registry, monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    with pytest.raises(RegistryError) as excinfo:
        registry.validate_environment("anthropic", "")
    assert str(excinfo.value) == (
        "missing required environment variables for anthropic: "
        "ANTHROPIC_API_KEY (at least one required)"
    )
    monkeypatch.setenv("ANTHROPIC_API_KEY", "placeholder")
    assert registry.validate_environment("anthropic", "") is None


def test_validate_environment_empty_value_counts_as_unset(registry, monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "")
    with pytest.raises(RegistryError, match="GROQ_API_KEY"):
        registry.validate_environment("groq", "")


def test_validate_environment_api_key_skips_env(registry, monkeypatch):
    monkeypatch.delenv("XAI_API_KEY", raising=False)
    assert registry.validate_environment("xai", "placeholder") is None
    with pytest.raises(RegistryError, match="unsupported provider"):
        registry.validate_environment("nope", "placeholder")


def test_suggest_models_limited_to_five(registry):
    suggestions = registry.suggest_models("anthropic", "claude-sonnet-4")
    assert len(suggestions) == 5
    models = registry.get_models_for_provider("anthropic")
    assert all(s in models for s in suggestions)


def test_suggest_models_substring(registry):
    suggestions = registry.suggest_models("morph", "FAST")
    assert suggestions == ["morph-v3-fast"]


def test_suggest_models_none_match(registry):
    assert registry.suggest_models("openai", "zzz") == []


def test_suggest_models_unknown_provider(registry):
    assert registry.suggest_models("nope", "gpt") == []


def test_supported_providers(registry):
    assert set(registry.get_supported_providers()) == ALL_PROVIDERS


def test_models_for_provider(registry):
    models = registry.get_models_for_provider("openai")
    assert "o3" in models
    assert models["o3"].cost.cache_read == 0.5
    with pytest.raises(RegistryError):
        registry.get_models_for_provider("nope")


def test_custom_providers():
    model = ModelInfo(id="m-1", name="Model One", cost=Cost(1.0, 2.0), limit=Limit(10, 5))
    custom = ModelsRegistry({"p": ProviderInfo(id="p", env=("P_KEY",), models={"m-1": model})})
    assert custom.get_supported_providers() == ["p"]
    assert custom.validate_model("p", "m-1") == model
    assert custom.get_required_env_vars("p") == ["P_KEY"]


def test_global_registry_is_shared():
    first = get_global_registry()
    assert first is get_global_registry()
    assert set(first.get_supported_providers()) == ALL_PROVIDERS
import pytest

from llmcatalog.catalog import Cost, Limit, ModelInfo, ProviderInfo, providers


def test_provider_ids():
    assert set(providers()) == {"deepseek", "llama", "morph", "vercel"}


@pytest.mark.parametrize("provider_id", ["deepseek", "llama", "morph", "vercel"])
def test_keys_match_ids(provider_id):
    info = providers()[provider_id]
    assert info.id == provider_id
    for key, model in info.models.items():
        assert key == model.id


def test_deepseek_chat_entry():
    model = providers()["deepseek"].models["deepseek-chat"]
    assert model.name == "DeepSeek Chat"
    assert model.limit == Limit(context=65536, output=8192)
    assert model.cost.cache_write is None
    assert model.reasoning and model.attachment


def test_env_and_npm():
    data = providers()
    assert data["vercel"].env == ("V0_API_KEY",)
    assert data["vercel"].npm == "@ai-sdk/vercel"
    assert data["morph"].npm == "@ai-sdk/openai-compatible"


def test_llama_models_are_free():
    models = providers()["llama"].models
    assert len(models) == 7
    assert all(m.cost.input == m.cost.output == 0 for m in models.values())


def test_vercel_large_context():
    assert providers()["vercel"].models["v0-1.5-lg"].limit.context == 512000


def test_morph_models_without_temperature():
    assert not any(m.temperature for m in providers()["morph"].models.values())


def test_providers_returns_fresh_mapping():
    first = providers()
    first["deepseek"].models.clear()
    assert "deepseek-chat" in providers()["deepseek"].models


def test_cost_to_dict_omits_missing_cache():
    cost = Cost(input=1.0, output=2.0)
    assert set(cost.to_dict()) == {"input", "output"}


def test_cost_round_trip_with_cache():
    cost = Cost(input=1.0, output=2.0, cache_read=0.5, cache_write=3.0)
    assert Cost.from_dict(cost.to_dict()) == cost


def test_cost_from_empty_dict():
    assert Cost.from_dict({}) == Cost()
    assert Cost.from_dict({}).cache_read is None


def test_limit_round_trip():
    limit = Limit(context=65536, output=8192)
    assert Limit.from_dict(limit.to_dict()) == limit


def test_model_round_trip():
    model = providers()["deepseek"].models["deepseek-reasoner"]
    assert ModelInfo.from_dict(model.to_dict()) == model


@pytest.mark.parametrize("provider_id", ["deepseek", "llama", "morph", "vercel"])
def test_provider_round_trip(provider_id):
    info = providers()[provider_id]
    assert ProviderInfo.from_dict(info.to_dict()) == info


def test_provider_from_dict_with_null_fields():
    info = ProviderInfo.from_dict({"id": "x", "env": None, "models": None})
    assert info.env == ()
    assert info.models == {}
    assert info.id == "x"


def test_model_from_dict_nested():
    model = ModelInfo.from_dict(
        {
            "id": "m",
            "name": "M",
            "cost": {"input": 3, "output": 15, "cache_read": 0.3},
            "limit": {"context": 128000, "output": 4096},
        }
    )
    assert model.cost == Cost(input=3.0, output=15.0, cache_read=0.3)
    assert model.limit == Limit(context=128000, output=4096)
    assert model.attachment is False
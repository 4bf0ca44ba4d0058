import pytest

from llmcatalog.catalog import ProviderInfo
from llmcatalog.providers_c import providers


@pytest.fixture
def catalog():
    return providers()


def test_provider_ids(catalog):
    assert set(catalog) == {"google-vertex", "groq", "mistral"}


def test_keys_match_provider_ids(catalog):
    for key, provider in catalog.items():
        assert provider.id == key


def test_model_keys_match_model_ids(catalog):
    for provider in catalog.values():
        assert provider.models
        for key, model in provider.models.items():
            assert model.id == key


def test_vertex_metadata(catalog):
    vertex = catalog["google-vertex"]
    assert vertex.name == "Vertex"
    assert vertex.npm == "@ai-sdk/google-vertex"
    assert vertex.env == (
        "GOOGLE_VERTEX_PROJECT",
        "GOOGLE_VERTEX_LOCATION",
        "GOOGLE_APPLICATION_CREDENTIALS",
    )


def test_groq_and_mistral_env(catalog):
    assert catalog["groq"].env == ("GROQ_API_KEY",)
    assert catalog["groq"].npm == "@ai-sdk/groq"
    assert catalog["mistral"].env == ("MISTRAL_API_KEY",)
    assert catalog["mistral"].npm == "@ai-sdk/mistral"


def test_vertex_gemini_pro(catalog):
    model = catalog["google-vertex"].models["gemini-2.5-pro"]
    assert model.name == "Gemini 2.5 Pro"
    assert model.reasoning is True
    assert model.cost.cache_read == 0.31
    assert model.limit.context == 1048576
    assert model.limit.output == 65536


def test_groq_guard_limits(catalog):
    model = catalog["groq"].models["meta-llama/llama-guard-4-12b"]
    assert model.name == "Llama Guard 4 12B"
    assert model.limit.context == 131072
    assert model.limit.output == 128


def test_mistral_codestral(catalog):
    model = catalog["mistral"].models["codestral-latest"]
    assert model.name == "Codestral"
    assert model.limit.context == 256000
    assert model.cost.cache_read is None


def test_pixtral_accepts_attachments(catalog):
    mistral = catalog["mistral"].models
    assert mistral["pixtral-12b"].attachment is True
    assert mistral["pixtral-large-latest"].attachment is True
    assert mistral["mistral-nemo"].attachment is False


def test_no_cache_write_prices(catalog):
    for provider in catalog.values():
        for model in provider.models.values():
            assert model.cost.cache_write is None


def test_all_models_accept_temperature(catalog):
    for provider in catalog.values():
        assert all(model.temperature for model in provider.models.values())


def test_output_limit_within_context(catalog):
    for provider in catalog.values():
        for model in provider.models.values():
            assert 0 < model.limit.output <= model.limit.context


def test_groq_only_has_uncached_pricing(catalog):
    for model in catalog["groq"].models.values():
        assert model.cost.cache_read is None
        assert model.cost.input > 0


@pytest.mark.parametrize("provider_id", ["google-vertex", "groq", "mistral"])
def test_round_trip_through_dict(catalog, provider_id):
    provider = catalog[provider_id]
    restored = ProviderInfo.from_dict(provider.to_dict())
    assert restored == provider


def test_fresh_dict_each_call():
    first = providers()
    first.pop("groq")
    assert "groq" in providers()
"""Catalogue entries for the Google Vertex, Groq and Mistral providers."""

from __future__ import annotations

from .catalog import ProviderInfo, _model, _provider


def _google_vertex() -> ProviderInfo:
    return _provider(
        "google-vertex",
        ("GOOGLE_VERTEX_PROJECT", "GOOGLE_VERTEX_LOCATION", "GOOGLE_APPLICATION_CREDENTIALS"),
        "@ai-sdk/google-vertex",
        "Vertex",
        [
            _model("gemini-2.0-flash", "Gemini 2.0 Flash", True, False, True,
                   (0.1, 0.4, 0.025, None), (1048576, 8192)),
            _model("gemini-2.0-flash-lite", "Gemini 2.0 Flash Lite", True, False, True,
                   (0.075, 0.3, None, None), (1048576, 8192)),
            _model("gemini-2.5-flash-lite-preview-06-17", "Gemini 2.5 Flash Lite Preview 06-17",
                   True, True, True, (0.1, 0.4, 0.025, None), (65536, 65536)),
            _model("gemini-2.5-flash-preview-04-17", "Gemini 2.5 Flash Preview 04-17",
                   True, True, True, (0.15, 0.6, 0.0375, None), (1048576, 65536)),
            _model("gemini-2.5-flash-preview-05-20", "Gemini 2.5 Flash Preview 05-20",
                   True, True, True, (0.15, 0.6, 0.0375, None), (1048576, 65536)),
            _model("gemini-2.5-pro", "Gemini 2.5 Pro", True, True, True,
                   (1.25, 10, 0.31, None), (1048576, 65536)),
            _model("gemini-2.5-pro-preview-05-06", "Gemini 2.5 Pro Preview 05-06",
                   True, True, True, (1.25, 10, 0.31, None), (1048576, 65536)),
            _model("gemini-2.5-pro-preview-06-05", "Gemini 2.5 Pro Preview 06-05",
                   True, True, True, (1.25, 10, 0.31, None), (1048576, 65536)),
        ],
    )


def _groq() -> ProviderInfo:
    return _provider(
        "groq",
        ("GROQ_API_KEY",),
        "@ai-sdk/groq",
        "Groq",
        [
            _model("deepseek-r1-distill-llama-70b", "DeepSeek R1 Distill Llama 70B",
                   False, True, True, (0.75, 0.99, None, None), (131072, 8192)),
            _model("gemma2-9b-it", "Gemma 2 9B", False, False, True,
                   (0.2, 0.2, None, None), (8192, 8192)),
            _model("llama-3.1-8b-instant", "Llama 3.1 8B Instant", False, False, True,
                   (0.05, 0.08, None, None), (131072, 8192)),
            _model("llama-3.3-70b-versatile", "Llama 3.3 70B Versatile", False, False, True,
                   (0.59, 0.79, None, None), (131072, 32768)),
            _model("llama-guard-3-8b", "Llama Guard 3 8B", False, False, True,
                   (0.2, 0.2, None, None), (8192, 8192)),
            _model("llama3-70b-8192", "Llama 3 70B", False, False, True,
                   (0.59, 0.79, None, None), (8192, 8192)),
            _model("llama3-8b-8192", "Llama 3 8B", False, False, True,
                   (0.05, 0.08, None, None), (8192, 8192)),
            _model("meta-llama/llama-4-maverick-17b-128e-instruct", "Llama 4 Maverick 17B",
                   False, False, True, (0.2, 0.6, None, None), (131072, 8192)),
            _model("meta-llama/llama-4-scout-17b-16e-instruct", "Llama 4 Scout 17B",
                   False, False, True, (0.11, 0.34, None, None), (131072, 8192)),
            _model("meta-llama/llama-guard-4-12b", "Llama Guard 4 12B", False, False, True,
                   (0.2, 0.2, None, None), (131072, 128)),
            _model("mistral-saba-24b", "Mistral Saba 24B", False, False, True,
                   (0.79, 0.79, None, None), (32768, 32768)),
            _model("qwen-qwq-32b", "Qwen QwQ 32B", False, True, True,
                   (0.29, 0.39, None, None), (131072, 16384)),
            _model("qwen/qwen3-32b", "Qwen3 32B", False, False, True,
                   (0.29, 0.59, None, None), (131072, 16384)),
        ],
    )


def _mistral() -> ProviderInfo:
    return _provider(
        "mistral",
        ("MISTRAL_API_KEY",),
        "@ai-sdk/mistral",
        "Mistral",
        [
            _model("codestral-latest", "Codestral", False, False, True,
                   (0.3, 0.9, None, None), (256000, 4096)),
            _model("devstral-small-2505", "Devstral", False, False, True,
                   (0.1, 0.3, None, None), (128000, 128000)),
            _model("magistral-medium-latest", "Magistral Medium", False, True, True,
                   (2, 5, None, None), (128000, 16384)),
            _model("magistral-small", "Magistral Small", False, True, True,
                   (0.5, 1.5, None, None), (128000, 128000)),
            _model("ministral-3b-latest", "Ministral 3B", False, False, True,
                   (0.04, 0.04, None, None), (128000, 128000)),
            _model("ministral-8b-latest", "Ministral 8B", False, False, True,
                   (0.1, 0.1, None, None), (128000, 128000)),
            _model("mistral-large-latest", "Mistral Large", False, False, True,
                   (2, 6, None, None), (131072, 16384)),
            _model("mistral-medium-latest", "Mistral Medium", False, False, True,
                   (0.4, 2, None, None), (128000, 16384)),
            _model("mistral-nemo", "Mistral Nemo", False, False, True,
                   (0.15, 0.15, None, None), (128000, 128000)),
            _model("mistral-small-latest", "Mistral Small", False, False, True,
                   (0.1, 0.3, None, None), (128000, 16384)),
            _model("open-mistral-7b", "Mistral 7B", False, False, True,
                   (0.25, 0.25, None, None), (8000, 8000)),
            _model("open-mixtral-8x22b", "Mixtral 8x22B", False, False, True,
                   (2, 6, None, None), (64000, 64000)),
            _model("open-mixtral-8x7b", "Mixtral 8x7B", False, False, True,
                   (0.7, 0.7, None, None), (32000, 32000)),
            _model("pixtral-12b", "Pixtral 12B", True, False, True,
                   (0.15, 0.15, None, None), (128000, 128000)),
            _model("pixtral-large-latest", "Pixtral Large", True, False, True,
                   (2, 6, None, None), (128000, 128000)),
        ],
    )


def providers() -> dict[str, ProviderInfo]:
    """Return the Google Vertex, Groq and Mistral provider entries."""
    entries = [_google_vertex(), _groq(), _mistral()]
    return {entry.id: entry for entry in entries}
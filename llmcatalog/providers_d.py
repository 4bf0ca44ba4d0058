"""Catalogue entries for the OpenAI, OpenRouter and xAI providers."""

from __future__ import annotations

from .catalog import ProviderInfo, _model, _provider


def _openai() -> ProviderInfo:
    return _provider(
        "openai",
        ("OPENAI_API_KEY",),
        "@ai-sdk/openai",
        "OpenAI",
        [
            _model("codex-mini-latest", "Codex Mini", True, True, False,
                   (1.5, 6, 0.375, None), (200000, 100000)),
            _model("gpt-4", "GPT-4", True, False, True,
                   (10, 30, None, None), (8192, 8192)),
            _model("gpt-4-turbo", "GPT-4 Turbo", True, False, True,
                   (10, 30, None, None), (128000, 4096)),
            _model("gpt-4.1", "GPT-4.1", True, False, True,
                   (2, 8, 0.5, None), (1047576, 32768)),
            _model("gpt-4.1-mini", "GPT-4.1 mini", True, False, True,
                   (0.4, 1.6, 0.1, None), (1047576, 32768)),
            _model("gpt-4.1-nano", "GPT-4.1 nano", True, False, True,
                   (0.1, 0.4, 0.03, None), (1047576, 32768)),
            _model("gpt-4.5-preview", "GPT-4.5 Preview", True, False, True,
                   (75, 150, 37.5, None), (128000, 16384)),
            _model("gpt-4o", "GPT-4o", True, False, True,
                   (2.5, 10, 1.25, None), (128000, 16384)),
            _model("gpt-4o-mini", "GPT-4o mini", True, False, True,
                   (0.15, 0.6, 0.08, None), (128000, 16384)),
            _model("o1", "o1", True, True, False,
                   (15, 60, 7.5, None), (200000, 100000)),
            _model("o1-mini", "o1-mini", False, True, False,
                   (1.1, 4.4, 0.55, None), (128000, 65536)),
            _model("o1-preview", "o1-preview", False, True, True,
                   (15, 60, 7.5, None), (128000, 32768)),
            _model("o1-pro", "o1-pro", True, True, False,
                   (150, 600, None, None), (200000, 100000)),
            _model("o3", "o3", True, True, False,
                   (2, 8, 0.5, None), (200000, 100000)),
            _model("o3-mini", "o3-mini", False, True, False,
                   (1.1, 4.4, 0.55, None), (200000, 100000)),
            _model("o3-pro", "o3-pro", True, True, False,
                   (20, 80, None, None), (200000, 100000)),
            _model("o4-mini", "o4-mini", True, True, False,
                   (1.1, 4.4, 0.28, None), (200000, 100000)),
        ],
    )


def _openrouter() -> ProviderInfo:
    return _provider(
        "openrouter",
        ("OPENROUTER_API_KEY",),
        "@openrouter/ai-sdk-provider",
        "OpenRouter",
        [
            _model("anthropic/claude-3.7-sonnet", "Claude Sonnet 3.7", True, True, True,
                   (15, 75, 1.5, 18.75), (200000, 128000)),
            _model("anthropic/claude-4-sonnet-20250522", "Claude Sonnet 4", True, True, True,
                   (3, 15, 0.3, 3.75), (200000, 64000)),
            _model("anthropic/claude-opus-4", "Claude Opus 4", True, True, True,
                   (15, 75, 1.5, 18.75), (200000, 32000)),
            _model("google/gemini-2.0-flash-001", "Gemini 2.0 Flash", True, False, True,
                   (0.1, 0.4, 0.025, None), (1048576, 8192)),
            _model("google/gemini-2.5-flash-preview-04-17", "Gemini 2.5 Flash Preview 04-17",
                   True, True, True, (0.15, 0.6, 0.0375, None), (1048576, 65536)),
            _model("google/gemini-2.5-flash-preview-05-20", "Gemini 2.5 Flash Preview 05-20",
                   True, True, True, (0.15, 0.6, 0.0375, None), (1048576, 65536)),
            _model("google/gemini-2.5-pro", "Gemini 2.5 Pro", True, True, True,
                   (1.25, 10, 0.31, None), (1048576, 65536)),
            _model("google/gemini-2.5-pro-preview-05-06", "Gemini 2.5 Pro Preview 05-06",
                   True, True, True, (1.25, 10, 0.31, None), (1048576, 65536)),
            _model("google/gemini-2.5-pro-preview-06-05", "Gemini 2.5 Pro Preview 06-05",
                   True, True, True, (1.25, 10, 0.31, None), (1048576, 65536)),
            _model("openai/gpt-4.1", "GPT-4.1", True, False, True,
                   (2, 8, 0.5, None), (1047576, 32768)),
            _model("openai/gpt-4o-mini", "GPT-4o-mini", True, False, True,
                   (0.15, 0.6, 0.08, None), (128000, 16384)),
        ],
    )


def _xai() -> ProviderInfo:
    grok_2 = (2, 10, 2.0, 10.0)
    grok_3 = (3, 15, 0.75, 15.0)
    grok_3_fast = (5, 25, 1.25, 25.0)
    grok_3_mini = (0.3, 0.5, 0.075, 0.5)
    grok_3_mini_fast = (0.6, 4, 0.15, 4.0)
    grok_beta = (5, 15, 5.0, 15.0)
    return _provider(
        "xai",
        ("XAI_API_KEY",),
        "@ai-sdk/xai",
        "xAI",
        [
            _model("grok-2", "Grok 2", False, False, True, grok_2, (131072, 8192)),
            _model("grok-2-1212", "Grok 2 (1212)", False, False, True, grok_2, (131072, 8192)),
            _model("grok-2-latest", "Grok 2 Latest", False, False, True, grok_2, (131072, 8192)),
            _model("grok-2-vision", "Grok 2 Vision", True, False, True, grok_2, (8192, 4096)),
            _model("grok-2-vision-1212", "Grok 2 Vision (1212)", True, False, True,
                   grok_2, (8192, 4096)),
            _model("grok-2-vision-latest", "Grok 2 Vision Latest", True, False, True,
                   grok_2, (8192, 4096)),
            _model("grok-3", "Grok 3", False, False, True, grok_3, (131072, 8192)),
            _model("grok-3-fast", "Grok 3 Fast", False, False, True, grok_3_fast, (131072, 8192)),
            _model("grok-3-fast-latest", "Grok 3 Fast Latest", False, False, True,
                   grok_3_fast, (131072, 8192)),
            _model("grok-3-latest", "Grok 3 Latest", False, False, True, grok_3, (131072, 8192)),
            _model("grok-3-mini", "Grok 3 Mini", False, True, True, grok_3_mini, (131072, 8192)),
            _model("grok-3-mini-fast", "Grok 3 Mini Fast", False, True, True,
                   grok_3_mini_fast, (131072, 8192)),
            _model("grok-3-mini-fast-latest", "Grok 3 Mini Fast Latest", False, True, True,
                   grok_3_mini_fast, (131072, 8192)),
            _model("grok-3-mini-latest", "Grok 3 Mini Latest", False, True, True,
                   grok_3_mini, (131072, 8192)),
            _model("grok-beta", "Grok Beta", False, False, True, grok_beta, (131072, 4096)),
            _model("grok-vision-beta", "Grok Vision Beta", True, False, True,
                   grok_beta, (8192, 4096)),
        ],
    )


def providers() -> dict[str, ProviderInfo]:
    """Return the OpenAI, OpenRouter and xAI provider entries."""
    entries = [_openai(), _openrouter(), _xai()]
    return {entry.id: entry for entry in entries}
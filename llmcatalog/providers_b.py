"""Catalogue entries for the Azure, GitHub Copilot and Google providers."""

from __future__ import annotations

from .catalog import _COMPATIBLE, _FREE, ProviderInfo, _model, _provider


def _azure() -> ProviderInfo:
    return _provider(
        "azure",
        ("AZURE_RESOURCE_NAME", "AZURE_API_KEY"),
        "@ai-sdk/azure",
        "Azure",
        [
            _model("gpt-3.5-turbo-0125", "GPT-3.5 Turbo 0125", False, False, True,
                   (0.5, 1.5, None, None), (16384, 16384)),
            _model("gpt-3.5-turbo-0301", "GPT-3.5 Turbo 0301", False, False, True,
                   (1.5, 2, None, None), (4096, 4096)),
            _model("gpt-3.5-turbo-0613", "GPT-3.5 Turbo 0613", False, False, True,
                   (3, 4, None, None), (16384, 16384)),
            _model("gpt-3.5-turbo-1106", "GPT-3.5 Turbo 1106", False, False, True,
                   (1, 2, None, None), (16384, 16384)),
            _model("gpt-3.5-turbo-instruct", "GPT-3.5 Turbo Instruct", False, False, True,
                   (1.5, 2, None, None), (4096, 4096)),
            _model("gpt-4", "GPT-4", False, False, True,
                   (60, 120, None, None), (8192, 8192)),
            _model("gpt-4-32k", "GPT-4 32K", False, False, True,
                   (60, 120, None, None), (32768, 32768)),
            _model("gpt-4-turbo", "GPT-4 Turbo", True, False, True,
                   (10, 30, None, None), (128000, 4096)),
            _model("gpt-4-turbo-vision", "GPT-4 Turbo Vision", True, False, True,
                   (10, 30, None, None), (128000, 4096)),
            _model("gpt-4.1", "GPT-4.1", True, False, True,
                   (2, 8, 0.5, None), (1047576, 32768)),
            _model("gpt-4.1-mini", "GPT-4.1 mini", True, False, True,
                   (0.4, 1.6, 0.1, None), (1047576, 32768)),
            _model("gpt-4.1-nano", "GPT-4.1 nano", True, False, True,
                   (0.1, 0.4, 0.03, None), (1047576, 32768)),
            _model("gpt-4o", "GPT-4o", True, False, True,
                   (2.5, 10, 1.25, None), (128000, 16384)),
            _model("gpt-4o-mini", "GPT-4o mini", True, False, True,
                   (0.15, 0.6, 0.08, None), (128000, 16384)),
            _model("o1", "o1", False, True, False,
                   (15, 60, 7.5, None), (200000, 100000)),
            _model("o1-mini", "o1-mini", False, True, False,
                   (1.1, 4.4, 0.55, None), (128000, 65536)),
            _model("o1-preview", "o1-preview", False, True, False,
                   (16.5, 66, 8.25, None), (128000, 32768)),
            _model("o3", "o3", True, True, False,
                   (2, 8, 0.5, None), (200000, 100000)),
            _model("o3-mini", "o3-mini", False, True, False,
                   (1.1, 4.4, 0.55, None), (200000, 100000)),
            _model("o4-mini", "o4-mini", True, True, False,
                   (1.1, 4.4, 0.28, None), (200000, 100000)),
        ],
    )


def _github_copilot() -> ProviderInfo:
    return _provider(
        "github-copilot",
        ("GITHUB_TOKEN",),
        _COMPATIBLE,
        "GitHub Copilot",
        [
            _model("claude-3.5-sonnet", "Claude Sonnet 3.5", True, False, True,
                   _FREE, (200000, 8192)),
            _model("claude-3.7-sonnet", "Claude Sonnet 3.7", True, False, True,
                   _FREE, (200000, 8192)),
            _model("claude-3.7-sonnet-thought", "Claude Sonnet 3.7 Thinking", True, True, True,
                   _FREE, (200000, 8192)),
            _model("claude-sonnet-4", "Claude Sonnet 4 (Preview)", True, False, True,
                   _FREE, (200000, 8192)),
            _model("gemini-2.0-flash-001", "Gemini 2.0 Flash", True, False, True,
                   _FREE, (1000000, 8192)),
            _model("gemini-2.5-pro", "Gemini 2.5 Pro (Preview)", True, False, True,
                   _FREE, (2000000, 8192)),
            _model("gpt-4.1", "GPT-4.1", True, False, True,
                   _FREE, (128000, 16384)),
            _model("gpt-4o", "GPT-4o", True, False, True,
                   _FREE, (128000, 16384)),
            _model("o1", "o1 (Preview)", False, True, False,
                   _FREE, (128000, 32768)),
            _model("o3-mini", "o3-mini", False, True, False,
                   _FREE, (128000, 65536)),
            _model("o4-mini", "o4-mini (Preview)", False, True, False,
                   _FREE, (128000, 65536)),
        ],
    )


def _google() -> ProviderInfo:
    return _provider(
        "google",
        ("GOOGLE_API_KEY", "GEMINI_API_KEY", "GOOGLE_GENERATIVE_AI_API_KEY"),
        "@ai-sdk/google",
        "Google",
        [
            _model("gemini-1.5-flash", "Gemini 1.5 Flash", True, False, True,
                   (0.075, 0.3, 0.01875, None), (1000000, 8192)),
            _model("gemini-1.5-flash-8b", "Gemini 1.5 Flash-8B", True, False, True,
                   (0.0375, 0.15, 0.01, None), (1000000, 8192)),
            _model("gemini-1.5-pro", "Gemini 1.5 Pro", True, False, True,
                   (1.25, 5, 0.3125, None), (2000000, 8192)),
            _model("gemini-2.0-flash", "Gemini 2.0 Flash", True, False, True,
                   (0.1, 0.4, 0.025, None), (1048576, 8192)),
            _model("gemini-2.0-flash-lite", "Gemini 2.0 Flash Lite", True, False, True,
                   (0.075, 0.3, None, None), (1048576, 8192)),
            _model("gemini-2.5-flash", "Gemini 2.5 Flash", True, True, True,
                   (0.3, 2.5, 0.075, None), (1048576, 65536)),
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


def providers() -> dict[str, ProviderInfo]:
    """Return the Azure, GitHub Copilot and Google provider entries."""
    entries = [_azure(), _github_copilot(), _google()]
    return {entry.id: entry for entry in entries}
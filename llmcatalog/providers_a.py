"""Catalogue entries for the Amazon Bedrock and Anthropic providers."""

from __future__ import annotations

from .catalog import ProviderInfo, _model, _provider


def _bedrock() -> ProviderInfo:
    return _provider(
        "amazon-bedrock",
        ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_REGION"),
        "@ai-sdk/amazon-bedrock",
        "Amazon Bedrock",
        [
            _model("ai21.jamba-1-5-large-v1:0", "Jamba 1.5 Large", False, False, True,
                   (2, 8, None, None), (256000, 4096)),
            _model("ai21.jamba-1-5-mini-v1:0", "Jamba 1.5 Mini", False, False, True,
                   (0.2, 0.4, None, None), (256000, 4096)),
            _model("amazon.nova-lite-v1:0", "Nova Lite", True, False, True,
                   (0.06, 0.24, 0.015, None), (300000, 8192)),
            _model("amazon.nova-micro-v1:0", "Nova Micro", False, False, True,
                   (0.035, 0.14, 0.00875, None), (128000, 8192)),
            _model("amazon.nova-premier-v1:0", "Nova Premier", True, True, True,
                   (2.5, 12.5, None, None), (1000000, 16384)),
            _model("amazon.nova-pro-v1:0", "Nova Pro", True, False, True,
                   (0.8, 3.2, 0.2, None), (300000, 8192)),
            _model("anthropic.claude-3-5-haiku-20241022-v1:0", "Claude Haiku 3.5", True, False, True,
                   (0.8, 4, 0.08, 1.0), (200000, 8192)),
            _model("anthropic.claude-3-5-sonnet-20240620-v1:0", "Claude Sonnet 3.5", True, False, True,
                   (3, 15, 0.3, 3.75), (200000, 8192)),
            _model("anthropic.claude-3-5-sonnet-20241022-v2:0", "Claude Sonnet 3.5 v2", True, False, True,
                   (3, 15, 0.3, 3.75), (200000, 8192)),
            _model("anthropic.claude-3-7-sonnet-20250219-v1:0", "Claude Sonnet 3.7", True, False, True,
                   (3, 15, 0.3, 3.75), (200000, 8192)),
            _model("anthropic.claude-3-haiku-20240307-v1:0", "Claude Haiku 3", True, False, True,
                   (0.25, 1.25, None, None), (200000, 4096)),
            _model("anthropic.claude-3-opus-20240229-v1:0", "Claude Opus 3", True, False, True,
                   (15, 75, None, None), (200000, 4096)),
            _model("anthropic.claude-3-sonnet-20240229-v1:0", "Claude Sonnet 3", True, False, True,
                   (3, 15, None, None), (200000, 4096)),
            _model("anthropic.claude-instant-v1", "Claude Instant", False, False, True,
                   (0.8, 2.4, None, None), (100000, 4096)),
            _model("anthropic.claude-opus-4-20250514-v1:0", "Claude Opus 4", True, True, True,
                   (15, 75, 1.5, 18.75), (200000, 32000)),
            _model("anthropic.claude-sonnet-4-20250514-v1:0", "Claude Sonnet 4", True, True, True,
                   (3, 15, 0.3, 3.75), (200000, 64000)),
            _model("anthropic.claude-v2", "Claude 2", False, False, True,
                   (8, 24, None, None), (100000, 4096)),
            _model("anthropic.claude-v2:1", "Claude 2.1", False, False, True,
                   (8, 24, None, None), (200000, 4096)),
            _model("cohere.command-light-text-v14", "Command Light", False, False, True,
                   (0.3, 0.6, None, None), (4096, 4096)),
            _model("cohere.command-r-plus-v1:0", "Command R+", False, False, True,
                   (3, 15, None, None), (128000, 4096)),
            _model("cohere.command-r-v1:0", "Command R", False, False, True,
                   (0.5, 1.5, None, None), (128000, 4096)),
            _model("cohere.command-text-v14", "Command", False, False, True,
                   (1.5, 2, None, None), (4096, 4096)),
            _model("deepseek.r1-v1:0", "DeepSeek-R1", False, True, True,
                   (1.35, 5.4, None, None), (128000, 32768)),
            _model("meta.llama3-1-70b-instruct-v1:0", "Llama 3.1 70B Instruct", False, False, True,
                   (0.72, 0.72, None, None), (128000, 4096)),
            _model("meta.llama3-1-8b-instruct-v1:0", "Llama 3.1 8B Instruct", False, False, True,
                   (0.22, 0.22, None, None), (128000, 4096)),
            _model("meta.llama3-2-11b-instruct-v1:0", "Llama 3.2 11B Instruct", True, False, True,
                   (0.16, 0.16, None, None), (128000, 4096)),
            _model("meta.llama3-2-1b-instruct-v1:0", "Llama 3.2 1B Instruct", False, False, True,
                   (0.1, 0.1, None, None), (131000, 4096)),
            _model("meta.llama3-2-3b-instruct-v1:0", "Llama 3.2 3B Instruct", False, False, True,
                   (0.15, 0.15, None, None), (131000, 4096)),
            _model("meta.llama3-2-90b-instruct-v1:0", "Llama 3.2 90B Instruct", True, False, True,
                   (0.72, 0.72, None, None), (128000, 4096)),
            _model("meta.llama3-3-70b-instruct-v1:0", "Llama 3.3 70B Instruct", False, False, True,
                   (0.72, 0.72, None, None), (128000, 4096)),
            _model("meta.llama3-70b-instruct-v1:0", "Llama 3 70B Instruct", False, False, True,
                   (2.65, 3.5, None, None), (8192, 2048)),
            _model("meta.llama3-8b-instruct-v1:0", "Llama 3 8B Instruct", False, False, True,
                   (0.3, 0.6, None, None), (8192, 2048)),
            _model("meta.llama4-maverick-17b-instruct-v1:0", "Llama 4 Maverick 17B Instruct",
                   True, False, True, (0.24, 0.97, None, None), (1000000, 16384)),
            _model("meta.llama4-scout-17b-instruct-v1:0", "Llama 4 Scout 17B Instruct",
                   True, False, True, (0.17, 0.66, None, None), (3500000, 16384)),
        ],
    )


def _anthropic() -> ProviderInfo:
    return _provider(
        "anthropic",
        ("ANTHROPIC_API_KEY",),
        "@ai-sdk/anthropic",
        "Anthropic",
        [
            _model("claude-3-5-haiku-20241022", "Claude Haiku 3.5", True, False, True,
                   (0.8, 4, 0.08, 1.0), (200000, 8192)),
            _model("claude-3-5-sonnet-20240620", "Claude Sonnet 3.5", True, False, True,
                   (3, 15, 0.3, 3.75), (200000, 8192)),
            _model("claude-3-5-sonnet-20241022", "Claude Sonnet 3.5 v2", True, False, True,
                   (3, 15, 0.3, 3.75), (200000, 8192)),
            _model("claude-3-7-sonnet-20250219", "Claude Sonnet 3.7", True, True, True,
                   (3, 15, 0.3, 3.75), (200000, 64000)),
            _model("claude-3-haiku-20240307", "Claude Haiku 3", True, False, True,
                   (0.25, 1.25, 0.03, 0.3), (200000, 4096)),
            _model("claude-3-opus-20240229", "Claude Opus 3", True, False, True,
                   (15, 75, 1.5, 18.75), (200000, 4096)),
            _model("claude-3-sonnet-20240229", "Claude Sonnet 3", True, False, True,
                   (3, 15, 0.3, 0.3), (200000, 4096)),
            _model("claude-opus-4-20250514", "Claude Opus 4", True, True, True,
                   (15, 75, 1.5, 18.75), (200000, 32000)),
            _model("claude-sonnet-4-20250514", "Claude Sonnet 4", True, True, True,
                   (3, 15, 0.3, 3.75), (200000, 64000)),
        ],
    )


def providers() -> dict[str, ProviderInfo]:
    """Return the Amazon Bedrock and Anthropic provider entries."""
    entries = [_bedrock(), _anthropic()]
    return {entry.id: entry for entry in entries}
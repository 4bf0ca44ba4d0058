"""Static catalogue of LLM providers and models, a validating registry and request-repairing httpx transports."""

__version__ = "0.1.0"

__all__ = ["__version__"]
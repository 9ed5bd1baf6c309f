"""modelcurl: a client bridge for OpenAI-compatible chat-completion APIs.

Detects reasoning-model providers from model names, shapes request bodies
for them, parses blocking and streaming (SSE) responses, and measures
token latency.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

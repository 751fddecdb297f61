"""External service clients and local services."""

from .openai_client import OpenAIClient
from .gemini_client import GeminiClient
from .entitlements import EntitlementGate, StaticSubscriptionOracle, SubscriptionOracle
from .storage import FileStore, InMemoryStore, KeyValueStore, LocalStore

__all__ = [
    "OpenAIClient",
    "GeminiClient",
    "EntitlementGate",
    "StaticSubscriptionOracle",
    "SubscriptionOracle",
    "FileStore",
    "InMemoryStore",
    "KeyValueStore",
    "LocalStore",
]

"""Error types raised by the GlowGuide clients and services."""


class GlowGuideError(Exception):
    """Base class for all GlowGuide failures."""


class MissingCredentialError(GlowGuideError):
    """No API key is configured for the requested provider."""
    
    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"{provider} API key not configured")


class InvalidEndpointError(GlowGuideError):
    """The configured endpoint is not a usable http(s) URL."""
    
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid API URL: {url!r}")


class MalformedResponseError(GlowGuideError):
    """The response was not JSON or did not have the expected shape."""
    
    def __init__(self, details: str):
        self.details = details
        super().__init__(f"Failed to decode response: {details}")


class HTTPFailureError(GlowGuideError):
    """The endpoint answered with a non-2xx status."""
    
    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP Error {status_code}: {body[:500]}")


class NetworkFailureError(GlowGuideError):
    """The request never produced a response (connection error, timeout)."""
    
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Network error: {cause}")


class NoResultProducedError(GlowGuideError):
    """The image endpoint answered but returned no image."""
    
    def __init__(self, provider: str = "image provider"):
        self.provider = provider
        super().__init__(f"No image was generated by {provider}")


class StoreError(GlowGuideError):
    """Purchase or entitlement failure reported by the subscription oracle."""
    
    VERIFICATION_FAILED = "verification_failed"
    PURCHASE_FAILED = "purchase_failed"
    PRODUCT_NOT_FOUND = "product_not_found"
    
    _MESSAGES = {
        VERIFICATION_FAILED: "Transaction verification failed",
        PURCHASE_FAILED: "Purchase could not be completed",
        PRODUCT_NOT_FOUND: "Product not found",
    }
    
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(self._MESSAGES.get(reason, reason))

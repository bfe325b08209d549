"""Shared (non-domain) exceptions."""


class ExternalServiceError(Exception):
    """External service call failed."""

    def __init__(self, service: str, message: str):
        self.service = service
        super().__init__(f"[{service}] {message}")


class FetchTimeoutError(ExternalServiceError):
    """External call did not answer within its timeout."""

    def __init__(self, service: str, timeout_ms: int):
        self.timeout_ms = timeout_ms
        super().__init__(service, f"request timed out after {timeout_ms}ms")

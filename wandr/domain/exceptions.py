"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""

    code = "DOMAIN_ERROR"


class InvalidInputError(DomainError):
    """Raised when a trip skeleton is malformed."""

    code = "INVALID_INPUT"


class OverAllocatedError(DomainError):
    """Raised when per-city night hints cannot fit the night budget."""

    code = "OVER_ALLOCATED"


class ContentUnavailableError(DomainError):
    """Raised when a content source is switched off."""

    code = "FEATURE_DISABLED"

    def __init__(self, feature: str):
        self.feature = feature
        super().__init__(f"{feature} is currently unavailable")

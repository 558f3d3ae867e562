class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or a stored document is malformed."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class InvalidPolicy(DomainError):
    """A policy value is missing or out of its domain (e.g. working days <= 0)."""


class PreconditionViolation(DomainError):
    """The caller broke a workflow precondition (not a transient condition)."""


class InvalidTransition(PreconditionViolation):
    """An enrollment action is not allowed from the current state."""


class NetworkUnavailable(DomainError):
    """The current network address could not be determined."""


class NotOnCompanyNetwork(DomainError):
    """Check-in/out attempted from an address outside the allow-list."""


class UploadError(DomainError):
    """Base class for blob upload failures."""


class UploadTimeout(UploadError):
    """The upload did not finish within the allowed time."""


class UploadFailed(UploadError):
    """The blob store rejected the upload or the request failed."""


class StoreUnavailable(DomainError):
    """The record store failed to serve a read or write."""

"""Errors raised by the client resolver.

  - ConfigurationError : backend endpoint or credentials missing (on either
                         side). Retrying won't help until the deployment is
                         fixed.
  - ResolutionError    : backend reached, but no usable result. The user can
                         retry with other input.
  - TransportError     : the backend (or a service behind it) could not be
                         reached. Retryable.
"""

from typing import Optional

GENERIC_FAILURE_MESSAGE = "Failed to identify song"


class ResolverError(Exception):
    def __init__(
        self,
        message: str = GENERIC_FAILURE_MESSAGE,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(ResolverError):
    pass


class ResolutionError(ResolverError):
    pass


class TransportError(ResolverError):
    pass

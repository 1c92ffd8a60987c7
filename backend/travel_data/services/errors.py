"""Provider errors raised by the upstream search services."""


class ProviderError(Exception):
    def __init__(self, message, status_code=502, details=None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details or {}


class AuthError(ProviderError):
    """Token endpoint refused the credentials or returned no access token."""


class UpstreamError(ProviderError):
    """Search endpoint failed or returned a body we could not parse."""

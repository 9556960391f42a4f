"""LinkedIn OAuth2 exceptions."""

from typing import Optional


class LinkedInOAuth2Error(Exception):
    """Base class for errors raised by this package."""


class InvalidConfigurationError(LinkedInOAuth2Error, ValueError):
    """Raised when the provider is configured with invalid options."""


class IdentityProviderError(LinkedInOAuth2Error):
    """
    Raised when LinkedIn answers with an error document.

    Attributes:
        message: Human readable description of the failure
        status_code: HTTP status code of the upstream response
        response_body: Parsed upstream response, if any
    """

    def __init__(self, message: str, status_code: int, response_body: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body

    def __str__(self):
        return f"{self.message} (HTTP {self.status_code})"


class TokenExpiredError(LinkedInOAuth2Error):
    """Raised when an API call is attempted with an expired access token."""

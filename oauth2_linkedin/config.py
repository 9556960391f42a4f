"""
Configuration management for the LinkedIn OAuth2 provider.

This module handles loading and validating the client credentials,
endpoint hosts and requested profile fields for LinkedIn.
"""

import os
from collections.abc import Sequence
from dataclasses import dataclass, replace

from .exceptions import InvalidConfigurationError

DEFAULT_FIELDS = (
    "id",
    "firstName",
    "lastName",
    "localizedFirstName",
    "localizedLastName",
    "profilePicture",
)

DEFAULT_SCOPES = ("r_liteprofile", "r_emailaddress")


def validate_fields(fields, label: str = "fields") -> tuple:
    """
    Check that ``fields`` is a sequence of names.

    Strings are sequences in Python but are rejected here, so a caller
    passing ``"id"`` instead of ``["id"]`` fails loudly.

    Returns:
        The names as a tuple

    Raises:
        InvalidConfigurationError: If fields is not a list/tuple of strings
    """
    if isinstance(fields, (str, bytes)) or not isinstance(fields, Sequence):
        raise InvalidConfigurationError(
            f"{label} must be a list of names, got {type(fields).__name__}"
        )
    for name in fields:
        if not isinstance(name, str):
            raise InvalidConfigurationError(
                f"{label} names must be strings, got {type(name).__name__}"
            )
    return tuple(fields)


def validate_scopes(scopes) -> tuple:
    """Accept a space separated string or a list of scope names."""
    if isinstance(scopes, str):
        return tuple(scopes.split())
    return validate_fields(scopes, label="scopes")


@dataclass(frozen=True)
class LinkedInProviderConfig:
    """LinkedIn OAuth2 client configuration."""

    # Client credentials
    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""

    # Profile fields requested from /v2/me
    fields: tuple = DEFAULT_FIELDS

    # Scopes used when the caller supplies none
    scopes: tuple = DEFAULT_SCOPES

    # LinkedIn hosts
    authorization_host: str = "https://www.linkedin.com"
    api_host: str = "https://api.linkedin.com"

    approval_prompt: str = "auto"

    def __post_init__(self):
        object.__setattr__(self, "fields", validate_fields(self.fields))
        object.__setattr__(self, "scopes", validate_scopes(self.scopes))

    def with_fields(self, fields) -> "LinkedInProviderConfig":
        """Return a copy of this configuration requesting ``fields``."""
        return replace(self, fields=validate_fields(fields))

    @classmethod
    def from_env(cls) -> "LinkedInProviderConfig":
        """Create configuration from environment variables."""
        base_url = os.environ.get("OAUTH2_BASE_URL", "http://localhost:5000")

        # Format: "id,firstName,lastName"
        fields_str = os.environ.get("LINKEDIN_FIELDS", "")
        if fields_str:
            fields = tuple(f.strip() for f in fields_str.split(",") if f.strip())
        else:
            fields = DEFAULT_FIELDS

        scopes_str = os.environ.get("LINKEDIN_SCOPES", "")
        scopes = tuple(scopes_str.split()) if scopes_str else DEFAULT_SCOPES

        return cls(
            client_id=os.environ.get("LINKEDIN_CLIENT_ID", ""),
            client_secret=os.environ.get("LINKEDIN_CLIENT_SECRET", ""),
            redirect_uri=os.environ.get(
                "LINKEDIN_REDIRECT_URI",
                f"{base_url}/auth/linkedin/callback"
            ),
            fields=fields,
            scopes=scopes,
            authorization_host=os.environ.get(
                "LINKEDIN_AUTHORIZATION_HOST", "https://www.linkedin.com"
            ),
            api_host=os.environ.get("LINKEDIN_API_HOST", "https://api.linkedin.com"),
            approval_prompt=os.environ.get("LINKEDIN_APPROVAL_PROMPT", "auto"),
        )

    @property
    def configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

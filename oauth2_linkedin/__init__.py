"""
oauth2-linkedin

LinkedIn provider adapter for OAuth 2.0 sign-in, built on Authlib.

This package provides:
- LinkedIn authorization, token and profile endpoint URLs
- Token and API error translation
- A resource owner model over the LinkedIn profile document
- A Flask blueprint and CLI for wiring the flow into an application
"""

__version__ = "0.1.0"

from .config import DEFAULT_FIELDS, LinkedInProviderConfig
from .exceptions import (
    IdentityProviderError,
    InvalidConfigurationError,
    LinkedInOAuth2Error,
    TokenExpiredError,
)
from .plugin import LinkedInOAuth2Plugin
from .blueprint import linkedin_bp
from .provider import LinkedInProvider
from .resource_owner import LinkedInResourceOwner, ResourceOwner

__all__ = [
    "DEFAULT_FIELDS",
    "LinkedInProviderConfig",
    "LinkedInProvider",
    "LinkedInOAuth2Plugin",
    "linkedin_bp",
    "LinkedInResourceOwner",
    "ResourceOwner",
    "LinkedInOAuth2Error",
    "InvalidConfigurationError",
    "IdentityProviderError",
    "TokenExpiredError",
    "__version__",
]

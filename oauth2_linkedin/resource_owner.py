"""
Resource owner model for LinkedIn profiles.

Wraps the JSON document returned by the ``/v2/me`` endpoint and exposes
typed accessors over it.
"""

from collections.abc import Mapping
from typing import Any, Optional, Protocol

PUBLIC_PROFILE_URL = "https://www.linkedin.com/in/"


class ResourceOwner(Protocol):
    """Minimal interface of an authenticated end-user."""

    def get_id(self) -> Any:
        ...

    def to_dict(self) -> dict:
        ...


class LinkedInResourceOwner:
    """A LinkedIn member profile."""

    def __init__(self, response: Optional[dict] = None):
        self._response = dict(response or {})

    def get_id(self):
        """Return the member id exactly as LinkedIn sent it."""
        return self._response.get("id")

    def get_first_name(self) -> Optional[str]:
        return self._response.get("firstName")

    def get_last_name(self) -> Optional[str]:
        return self._response.get("lastName")

    def get_image_url(self) -> Optional[str]:
        return self._response.get("profilePicture")

    def get_email(self) -> Optional[str]:
        return self._response.get("emailAddress")

    def get_url(self) -> Optional[str]:
        """Return the public profile URL, if the vanity name was requested."""
        vanity_name = self._response.get("vanityName")
        if not vanity_name:
            return None
        return f"{PUBLIC_PROFILE_URL}{vanity_name}"

    def get_attribute(self, path: str):
        """
        Look up a value by dotted path, e.g. ``"profilePicture.displayImage"``.

        Args:
            path: Keys separated by dots, one per nesting level

        Returns:
            The value found, or None if any segment is missing
        """
        value = self._response
        for key in path.split("."):
            if not isinstance(value, Mapping) or key not in value:
                return None
            value = value[key]
        return value

    def to_dict(self) -> dict:
        return dict(self._response)

    def __repr__(self):
        return f"<LinkedInResourceOwner id={self.get_id()!r}>"

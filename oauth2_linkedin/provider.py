"""
LinkedIn provider adapter.

Supplies the LinkedIn specific parts of the OAuth 2.0 authorization code
flow: endpoint URLs, default scopes, the profile field list, error
detection on token and API responses and the mapping of the profile
document into a resource owner. The flow itself (state, query strings,
code exchange, bearer headers, token expiry) is handled by Authlib.
"""

import logging
from collections.abc import Mapping
from typing import Optional, Union
from urllib.parse import urlencode

import httpx
from authlib.integrations.base_client import InvalidTokenError
from authlib.integrations.httpx_client import OAuth2Client
from authlib.oauth2.rfc6749 import OAuth2Token

from .config import LinkedInProviderConfig
from .exceptions import IdentityProviderError, InvalidConfigurationError, TokenExpiredError
from .resource_owner import LinkedInResourceOwner

logger = logging.getLogger(__name__)

TokenLike = Union[str, Mapping]


class LinkedInProvider:
    """
    OAuth 2.0 provider adapter for LinkedIn.

    Instances are cheap and hold no flow state; a fresh Authlib client is
    created for every request.
    """

    AUTHORIZATION_PATH = "/oauth/v2/authorization"
    ACCESS_TOKEN_PATH = "/oauth/v2/accessToken"
    RESOURCE_OWNER_PATH = "/v2/me"
    EMAIL_PATH = "/v2/emailAddress"
    EMAIL_PROJECTION = "(elements*(handle~))"

    SCOPE_SEPARATOR = " "
    RESTLI_PROTOCOL_VERSION = "2.0.0"

    def __init__(
        self,
        config: LinkedInProviderConfig,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = 10.0,
    ):
        """
        Initialize the provider.

        Args:
            config: LinkedIn client configuration
            transport: httpx transport used for every request (optional)
            timeout: Request timeout in seconds
        """
        if not isinstance(config, LinkedInProviderConfig):
            raise InvalidConfigurationError(
                f"config must be a LinkedInProviderConfig, got {type(config).__name__}"
            )
        self.config = config
        self.transport = transport
        self.timeout = timeout

    @classmethod
    def from_options(cls, transport=None, timeout: float = 10.0, **options) -> "LinkedInProvider":
        """Build a provider from keyword options (client_id, fields, ...)."""
        return cls(LinkedInProviderConfig(**options), transport=transport, timeout=timeout)

    @classmethod
    def from_env(cls) -> "LinkedInProvider":
        return cls(LinkedInProviderConfig.from_env())

    def create_oauth2_client(self, token: Optional[dict] = None) -> OAuth2Client:
        """Create an Authlib client wired with LinkedIn's error checks."""
        client = OAuth2Client(
            client_id=self.config.client_id,
            client_secret=self.config.client_secret,
            redirect_uri=self.config.redirect_uri,
            token_endpoint_auth_method="client_secret_post",
            token=token,
            transport=self.transport,
            timeout=self.timeout,
        )
        client.register_compliance_hook("access_token_response", self._check_token_response)
        client.register_compliance_hook("refresh_token_response", self._check_token_response)
        return client

    # Endpoints

    def get_base_authorization_url(self) -> str:
        return f"{self.config.authorization_host}{self.AUTHORIZATION_PATH}"

    def get_base_access_token_url(self, params: Optional[dict] = None) -> str:
        return f"{self.config.authorization_host}{self.ACCESS_TOKEN_PATH}"

    def get_resource_owner_details_url(self, token: Optional[TokenLike] = None) -> str:
        """
        Build the profile URL for the configured field list.

        Fields are joined with literal commas, e.g.
        ``/v2/me?fields=id,firstName,lastName``.
        """
        query = urlencode({"fields": ",".join(self.config.fields)}, safe=",")
        return f"{self.config.api_host}{self.RESOURCE_OWNER_PATH}?{query}"

    def get_resource_owner_email_url(self, token: Optional[TokenLike] = None) -> str:
        return (
            f"{self.config.api_host}{self.EMAIL_PATH}"
            f"?q=members&projection={self.EMAIL_PROJECTION}"
        )

    # Scopes and fields

    def get_default_scopes(self) -> list:
        return list(self.config.scopes)

    def get_scope_separator(self) -> str:
        return self.SCOPE_SEPARATOR

    def get_fields(self) -> list:
        return list(self.config.fields)

    def with_fields(self, fields) -> "LinkedInProvider":
        """
        Return a new provider requesting ``fields`` from the profile endpoint.

        The receiver is left unchanged.

        Raises:
            InvalidConfigurationError: If fields is not a list of strings
        """
        return type(self)(
            self.config.with_fields(fields),
            transport=self.transport,
            timeout=self.timeout,
        )

    # Authorization code flow

    def get_authorization_url(self, scope=None, state: Optional[str] = None, **params):
        """
        Build the URL the user is redirected to for consent.

        Args:
            scope: List of scopes (or a preformatted string); defaults apply
                when omitted
            state: CSRF state, generated when omitted
            **params: Extra query parameters

        Returns:
            Tuple of (authorization_url, state)
        """
        if scope is None:
            scope = self.get_default_scopes()
        if not isinstance(scope, str):
            scope = self.get_scope_separator().join(scope)
        params.setdefault("approval_prompt", self.config.approval_prompt)

        with self.create_oauth2_client() as client:
            url, state = client.create_authorization_url(
                self.get_base_authorization_url(),
                state=state,
                scope=scope,
                **params,
            )

        logger.debug(f"LinkedIn authorization URL: {url}")
        return url, state

    def get_access_token(self, grant: str = "authorization_code", **params) -> OAuth2Token:
        """
        Request an access token from LinkedIn.

        Args:
            grant: OAuth2 grant type
            **params: Grant parameters, e.g. ``code`` for authorization_code

        Returns:
            The token issued by LinkedIn

        Raises:
            IdentityProviderError: If the token response carries an error
                or is not a JSON object
        """
        url = self.get_base_access_token_url(params)
        with self.create_oauth2_client() as client:
            token = client.fetch_token(url, grant_type=grant, **params)
        logger.info(f"Obtained LinkedIn access token via {grant} grant")
        return token

    def refresh_access_token(self, refresh_token: str) -> OAuth2Token:
        """Exchange a refresh token for a new access token."""
        url = self.get_base_access_token_url()
        with self.create_oauth2_client() as client:
            token = client.refresh_token(url, refresh_token=refresh_token)
        logger.info("Refreshed LinkedIn access token")
        return token

    # Resource owner

    def fetch_resource_owner_details(self, token: TokenLike) -> dict:
        """Fetch the raw profile document for the token's owner."""
        return self._get_json(self.get_resource_owner_details_url(token), token)

    def get_resource_owner_email(self, token: TokenLike) -> Optional[str]:
        """Fetch the member's primary email address, if LinkedIn returns one."""
        data = self._get_json(self.get_resource_owner_email_url(token), token)
        for element in data.get("elements", []):
            email = element.get("handle~", {}).get("emailAddress")
            if email:
                return email
        return None

    def get_resource_owner(self, token: TokenLike, include_email: bool = False) -> LinkedInResourceOwner:
        """
        Fetch the profile of the token's owner.

        Args:
            token: Access token (dict or bare token string)
            include_email: Also query the email endpoint and merge the
                address in under ``emailAddress``

        Returns:
            LinkedInResourceOwner for the member

        Raises:
            IdentityProviderError: If LinkedIn answers with an error or a
                body that is not a JSON object
            TokenExpiredError: If the token's ``expires_at`` is in the past;
                no request is sent in that case
        """
        response = self.fetch_resource_owner_details(token)
        if include_email:
            email = self.get_resource_owner_email(token)
            if email:
                response = {**response, "emailAddress": email}
        owner = self.create_resource_owner(response, token)
        logger.info(f"Fetched LinkedIn profile for member {owner.get_id()}")
        return owner

    def create_resource_owner(self, response: dict, token: Optional[TokenLike] = None) -> LinkedInResourceOwner:
        return LinkedInResourceOwner(response)

    # Errors

    def check_response_for_errors(self, status_code: int, data) -> None:
        """
        Raise if a parsed LinkedIn response is an error document.

        Args:
            status_code: HTTP status code of the response
            data: Parsed JSON body

        Raises:
            IdentityProviderError: If the body has a non-empty ``error``
        """
        if not isinstance(data, Mapping) or not data.get("error"):
            return

        message = (
            data.get("error_description")
            or httpx.codes.get_reason_phrase(status_code)
            or str(data["error"])
        )
        logger.warning(f"LinkedIn returned error '{data['error']}' (HTTP {status_code}): {message}")
        raise IdentityProviderError(message, status_code, dict(data))

    def _check_token_response(self, response: httpx.Response) -> httpx.Response:
        data = self._parse_json(response)
        self.check_response_for_errors(response.status_code, data)
        if not isinstance(data, Mapping):
            raise IdentityProviderError(
                "Invalid token response from LinkedIn", response.status_code
            )
        return response

    def _get_json(self, url: str, token: TokenLike) -> dict:
        headers = {"X-Restli-Protocol-Version": self.RESTLI_PROTOCOL_VERSION}
        try:
            with self.create_oauth2_client(token=self._normalize_token(token)) as client:
                response = client.get(url, headers=headers)
        except InvalidTokenError as e:
            raise TokenExpiredError("LinkedIn access token has expired") from e

        data = self._parse_json(response)
        self.check_response_for_errors(response.status_code, data)
        if not isinstance(data, Mapping):
            raise IdentityProviderError(
                "Invalid response from LinkedIn: expected a JSON object",
                response.status_code,
            )
        return data

    @staticmethod
    def _parse_json(response: httpx.Response):
        try:
            return response.json()
        except ValueError as e:
            logger.error(
                f"Non-JSON response from {response.request.url} (HTTP {response.status_code})"
            )
            raise IdentityProviderError(
                f"Invalid response from LinkedIn: {response.reason_phrase}",
                response.status_code,
            ) from e

    @staticmethod
    def _normalize_token(token: TokenLike) -> dict:
        """LinkedIn omits token_type; Authlib needs it to sign requests."""
        if isinstance(token, str):
            return {"access_token": token, "token_type": "Bearer"}
        token = dict(token)
        token.setdefault("token_type", "Bearer")
        return token

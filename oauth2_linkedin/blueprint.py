"""
Flask blueprint for signing in with LinkedIn.

This blueprint provides the following endpoints:
- GET /auth/linkedin/login - Initiate the LinkedIn authorization flow
- GET /auth/linkedin/callback - Receive the authorization code and fetch the profile
- GET /auth/linkedin/info - Describe the configured provider
"""

import logging

from flask import current_app, jsonify, redirect, request, session, url_for
from flask_smorest import Blueprint

from .exceptions import IdentityProviderError
from .provider import LinkedInProvider

logger = logging.getLogger(__name__)

EXTENSION_KEY = "linkedin_oauth2"

linkedin_bp = Blueprint(
    "linkedin_auth",
    __name__,
    url_prefix="/auth/linkedin",
    description="LinkedIn OAuth2 authentication endpoints"
)


def get_provider() -> LinkedInProvider:
    """Get the app's provider, building one from the environment if needed."""
    provider = current_app.extensions.get(EXTENSION_KEY)
    if provider is None:
        provider = LinkedInProvider.from_env()
        current_app.extensions[EXTENSION_KEY] = provider
    return provider


@linkedin_bp.route("/login")
def login():
    """
    Redirect the user to LinkedIn for consent.

    Query Parameters:
        next: URL to return to after a successful login (optional)
    """
    provider = get_provider()

    if not provider.config.configured:
        return jsonify({
            "error": "LinkedIn not configured",
            "message": "LINKEDIN_CLIENT_ID and LINKEDIN_CLIENT_SECRET must be set"
        }), 500

    authorization_url, state = provider.get_authorization_url()
    session["linkedin_state"] = state
    session["auth_return_url"] = request.args.get("next", "/")

    logger.info("Initiating LinkedIn login, redirecting to provider")
    return redirect(authorization_url)


@linkedin_bp.route("/callback")
def callback():
    """
    LinkedIn redirect target.

    Verifies the state, exchanges the code for a token and returns the
    member profile as JSON.
    """
    provider = get_provider()

    state = request.args.get("state")
    stored_state = session.pop("linkedin_state", None)
    if not state or state != stored_state:
        logger.warning("LinkedIn state mismatch")
        return jsonify({"error": "invalid_state"}), 400

    error = request.args.get("error")
    if error:
        error_description = request.args.get("error_description", "Unknown error")
        logger.error(f"LinkedIn authorization error: {error} - {error_description}")
        return jsonify({"error": error, "message": error_description}), 400

    code = request.args.get("code")
    if not code:
        logger.error("No authorization code received")
        return jsonify({"error": "missing_code"}), 400

    try:
        token = provider.get_access_token("authorization_code", code=code)
        owner = provider.get_resource_owner(token)
    except IdentityProviderError as e:
        logger.error(f"LinkedIn sign-in failed: {e}")
        return jsonify({
            "error": "identity_provider_error",
            "message": e.message,
            "upstream_status": e.status_code,
        }), 502

    session["linkedin_member_id"] = owner.get_id()
    return_url = session.pop("auth_return_url", "/")

    logger.info(f"Member {owner.get_id()} authenticated via LinkedIn")
    return jsonify({
        "provider": "linkedin",
        "id": owner.get_id(),
        "user": owner.to_dict(),
        "next": return_url,
    })


@linkedin_bp.route("/info")
def auth_info():
    """Return information about the configured provider."""
    provider = get_provider()

    return jsonify({
        "provider": "linkedin",
        "login_url": url_for("linkedin_auth.login", _external=True),
        "configured": provider.config.configured,
        "fields": provider.get_fields(),
    })

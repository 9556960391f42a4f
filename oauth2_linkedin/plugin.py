"""
Flask extension registering LinkedIn sign-in on an application.
"""

import logging
from typing import Optional

from flask import Flask

from .blueprint import EXTENSION_KEY, linkedin_bp
from .cli import linkedin_cli
from .provider import LinkedInProvider

logger = logging.getLogger(__name__)


class LinkedInOAuth2Plugin:
    """
    LinkedIn OAuth2 extension for Flask.

    Registers the ``/auth/linkedin`` blueprint and the ``linkedin`` CLI
    group, and makes the provider available to request handlers.
    """

    def __init__(self, app: Flask = None, provider: Optional[LinkedInProvider] = None):
        """
        Initialize the plugin.

        Args:
            app: Flask application instance (optional, can call init_app later)
            provider: Provider to use; built from the environment if omitted
        """
        self.app = app
        self.provider = provider

        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask):
        """
        Initialize the plugin with a Flask application.

        Args:
            app: Flask application instance
        """
        self.app = app

        if self.provider is None:
            self.provider = LinkedInProvider.from_env()
        app.extensions[EXTENSION_KEY] = self.provider

        if not app.config.get("SECRET_KEY"):
            logger.warning(
                "Flask SECRET_KEY not set. The OAuth2 state cannot be kept in the session."
            )

        app.register_blueprint(linkedin_bp)
        app.cli.add_command(linkedin_cli)

        logger.info("LinkedIn OAuth2 plugin initialized")
        if not self.provider.config.configured:
            logger.warning("LinkedIn not fully configured - client id or secret missing")

    @staticmethod
    def get_name() -> str:
        return "linkedin-oauth2"

    @staticmethod
    def get_version() -> str:
        from . import __version__
        return __version__

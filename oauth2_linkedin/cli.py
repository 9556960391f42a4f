"""
CLI commands for inspecting the LinkedIn OAuth2 configuration.

Available standalone as ``oauth2-linkedin`` and on the Flask CLI as
``flask linkedin`` once the plugin is initialized.
"""

import click

from .config import LinkedInProviderConfig
from .provider import LinkedInProvider


@click.group("linkedin")
def linkedin_cli():
    """LinkedIn OAuth2 management commands."""
    pass


@linkedin_cli.command("show-config")
def show_config():
    """Display current LinkedIn configuration."""
    config = LinkedInProviderConfig.from_env()
    provider = LinkedInProvider(config)

    click.echo("=== LinkedIn OAuth2 Configuration ===")
    click.echo(f"Authorization URL: {provider.get_base_authorization_url()}")
    click.echo(f"Token URL: {provider.get_base_access_token_url()}")
    click.echo(f"Profile URL: {provider.get_resource_owner_details_url()}")
    click.echo(f"Redirect URI: {config.redirect_uri}")
    click.echo(f"Scopes: {provider.get_scope_separator().join(config.scopes)}")
    click.echo(f"Client ID: {config.client_id[:8] + '...' if config.client_id else 'Not configured'}")
    click.echo(f"Client Secret: {'Configured' if config.client_secret else 'Not configured'}")

    click.echo("\n=== Profile Fields ===")
    for name in config.fields:
        click.echo(f"  {name}")


@linkedin_cli.command("authorize-url")
@click.option("--scope", "scopes", multiple=True, help="Scope to request (repeatable)")
@click.option("--state", default=None, help="State value (generated if omitted)")
def authorize_url(scopes, state):
    """Print an authorization URL and its state."""
    provider = LinkedInProvider.from_env()
    url, state = provider.get_authorization_url(scope=list(scopes) or None, state=state)

    click.echo(url)
    click.echo(f"state: {state}")


@linkedin_cli.command("profile-url")
@click.option("--field", "fields", multiple=True, help="Profile field (repeatable)")
def profile_url(fields):
    """Print the profile URL for a field list."""
    provider = LinkedInProvider.from_env()
    if fields:
        provider = provider.with_fields(list(fields))
    click.echo(provider.get_resource_owner_details_url())


@linkedin_cli.command("validate-config")
def validate_config():
    """Validate the current configuration."""
    config = LinkedInProviderConfig.from_env()
    errors = []

    if not config.client_id:
        errors.append("LINKEDIN_CLIENT_ID not configured")
    if not config.client_secret:
        errors.append("LINKEDIN_CLIENT_SECRET not configured")
    if not config.redirect_uri:
        errors.append("LINKEDIN_REDIRECT_URI not configured")

    if errors:
        click.echo("=== Errors ===")
        for error in errors:
            click.echo(f"  x {error}")
        raise click.ClickException(
            f"Configuration validation failed with {len(errors)} error(s)"
        )

    click.echo("[OK] Configuration is valid!")

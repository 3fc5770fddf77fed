import click
from flask import current_app
from flask.cli import with_appcontext

from .security.mfa.manager import get_mfa_manager


def echo_header(title):
    click.echo(click.style(title, fg="green"))
    click.echo(click.style("-" * len(title), fg="green"))


@click.group()
def mfa():
    """MFA provider tools."""
    pass


@mfa.command("providers")
@with_appcontext
def list_providers():
    """
    List registered MFA providers and whether they are active
    """
    try:
        manager = get_mfa_manager(current_app)
    except RuntimeError as e:
        raise click.ClickException(str(e))
    active = set(id(p) for p in manager.registry.active_providers)
    echo_header("MFA providers")
    for provider in manager.registry.registered_providers:
        state = "active" if id(provider) in active else "inactive"
        click.echo("{:<30}{}".format(provider.provider_id(), state))

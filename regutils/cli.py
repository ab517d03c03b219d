"""
Command line front end for regutils.
"""
import functools
import logging

import click

from .auth import get_auth_config
from .exceptions import RegUtilsException
from .parsing import get_repo_and_ref

LOGGER = logging.getLogger(__package__)

_log_levels = ["DEBUG", "INFO", "WARNING", "CRITICAL"]
_log_levels = _log_levels + [i.lower() for i in _log_levels]


def _reports_errors(func):
    """
    Turn regutils errors into a click error message and non-zero exit.
    """

    @functools.wraps(func)
    def invoke(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except RegUtilsException as exc:
            raise click.ClickException(str(exc)) from exc

    return invoke


@click.group()
@click.option("-u", "--username", default="", help="Username for the registry.")
@click.option("-p", "--password", default="", help="Password for the registry.")
@click.option("-r", "--registry", default="", help="URL of the registry.")
@click.option(
    "-c",
    "--config-dir",
    envvar="DOCKER_CONFIG",
    type=click.Path(file_okay=False, dir_okay=True),
    help="Docker config directory.",
)
@click.option("-l", "--log-level", default="WARNING", type=click.Choice(_log_levels))
@click.pass_context
def main(ctx, username, password, registry, config_dir, log_level):
    logging.basicConfig(level=log_level.upper())
    ctx.obj = dict(
        username=username,
        password=password,
        registry=registry,
        config_dir=config_dir,
    )


@main.command()
@click.pass_obj
@_reports_errors
def auth(obj):
    """Print the credentials that would be used for the registry."""
    creds = get_auth_config(**obj)
    click.echo("server: {}".format(creds.server_address))
    click.echo("username: {}".format(creds.username))


@main.command()
@click.argument("args", nargs=-1)
@_reports_errors
def ref(args):
    """Split a repository[:tag|@digest] name into its parts."""
    reference = get_repo_and_ref(args)
    LOGGER.debug("Parsed %r", reference)
    click.echo(reference.repo)
    click.echo(reference.ref)

"""CLI main entry point."""

import logging
from pathlib import Path

import click

from .config import Settings
from .document import render_config
from .errors import CmsConfigException
from .log import setup as setup_log

logger = logging.getLogger(__name__)


@click.group()
@click.option("--config", "-c", default=None, help="Configuration file path (TOML)")
@click.option("--log-file", default=None, help="Also write logs to this file")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug messages")
@click.pass_context
def cli(ctx, config, log_file, verbose):
    """CMS Config - serve the CMS admin configuration document."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    setup_log(log_file, verbose=verbose)


def _load_settings(config_path):
    try:
        return Settings.load(config_path)
    except CmsConfigException as e:
        logger.error(f"Application error: {e}")
        raise click.ClickException(str(e))


@cli.command(name="render")
@click.option(
    "--output",
    "-o",
    default=None,
    type=click.Path(dir_okay=False),
    help="Write the document to this file instead of stdout",
)
@click.pass_context
def render(ctx, output):
    """Print the CMS admin configuration as YAML."""
    settings = _load_settings(ctx.obj["config_path"])
    body = render_config(settings)

    if output is None:
        click.echo(body, nl=False)
        return

    Path(output).write_text(body, encoding="utf-8")
    logger.info(f"Configuration written to {output}")


@cli.command(name="serve")
@click.option("--host", "-h", default=None, help="Override host from config")
@click.option("--port", "-p", default=None, type=int, help="Override port from config")
@click.pass_context
def serve(ctx, host, port):
    """Start the web server."""
    import uvicorn

    from .api import create_app

    settings = _load_settings(ctx.obj["config_path"])

    host = host or settings.web.host
    port = port or settings.web.port

    if settings.local_backend:
        logger.warning("Development mode: the CMS will use its local backend proxy.")

    logger.info(f"Starting web service on http://{host}:{port}")
    uvicorn.run(create_app(settings), host=host, port=port)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()

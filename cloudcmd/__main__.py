import json
import logging
import sys

import click
import uvicorn
from dotenv import load_dotenv

from cloudcmd.config.provider import EnvConfigProvider
from cloudcmd.errors import ConversionError
from cloudcmd.logging_config import configure_logging, server_logging_config
from cloudcmd.modules.converter import convert

load_dotenv()

logger = logging.getLogger("cloudcmd.cli")


def _print_commands(commands, output: str) -> None:
    if output == "shell":
        for cmd in commands:
            click.echo(cmd.to_shell())
    else:
        click.echo(json.dumps([cmd.model_dump(mode="json") for cmd in commands], indent=2))


@click.group()
@click.option("--log-level", "log_level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
@click.pass_context
def main(ctx, log_level):
    """Convert cloud-config documents into provisioning commands."""
    ctx.obj = {"log_level": log_level}
    configure_logging(log_level)


@main.command("convert")
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--output", "output", type=click.Choice(["json", "shell"]), default="json")
@click.option("--strict-encodings", is_flag=True, default=False, help="Fail on unknown encoding labels")
@click.option(
    "--legacy-single-step",
    is_flag=True,
    default=False,
    help="Apply only the first step of combined encodings such as gz+base64",
)
def convert_command(source, output: str, strict_encodings: bool, legacy_single_step: bool):
    """Print the commands for the cloud-config in SOURCE (default: stdin)."""
    decoder_config = EnvConfigProvider().get_decoder_config()
    if strict_encodings:
        decoder_config.strict_encodings = True
    if legacy_single_step:
        decoder_config.chain_encodings = False

    try:
        commands = convert(source.read(), decoder_config)
    except ConversionError as e:
        _print_commands(e.commands, output)
        click.echo(f"Error ({e.kind}): {e.message}", err=True)
        sys.exit(1)

    _print_commands(commands, output)


@main.command("serve")
@click.option("--host", "host", default=None)
@click.option("--port", "port", type=int, default=None)
@click.pass_context
def serve(ctx, host, port):
    """Run the HTTP conversion service."""
    from cloudcmd.main import create_app

    provider = EnvConfigProvider()
    api_config = provider.get_api_config()
    app = create_app(provider)

    uvicorn.run(
        app,
        host=host or api_config.host,
        port=port or api_config.port,
        log_config=server_logging_config(ctx.obj["log_level"]),
    )


if __name__ == "__main__":
    main()

"""CLI entry point for the Linux/m68k bootinfo decoder."""

import json
from configparser import Error as ConfigParserError

import click
from rich.console import Console
from rich.markup import escape

from m68k_bootinfo import __version__
from m68k_bootinfo.decoding import BootinfoDecoder, BootinfoError
from m68k_bootinfo.renderer import build_table, record_to_dict, render_record
from m68k_bootinfo.shared import DEFAULT_BOOTINFO_FILE, ConfigManager, LogManager

console = Console()
err_console = Console(stderr=True)

OUTPUT_FORMATS = ("text", "table", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _usage(ctx, param, value):
    """Print usage to stderr and exit with failure, like any other bad invocation."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(ctx.get_help(), err=True)
    ctx.exit(1)


def _fail(ctx, logger, message: str):
    err_console.print(f"[red]✗ {escape(message)}[/red]", soft_wrap=True)
    logger.debug(f"Aborting: {message}")
    ctx.exit(1)


@click.command(add_help_option=False)
@click.option(
    "-h",
    "--help",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_usage,
    help="Display this usage information",
)
@click.option(
    "--file",
    "-f",
    "bootinfo_file",
    type=click.Path(dir_okay=False),
    default=None,
    help=f"Specify bootinfo file (default: {DEFAULT_BOOTINFO_FILE})",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default: text)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="INI configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level for diagnostics on stderr (default: WARNING)",
)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, bootinfo_file, output_format, config_path, log_level):
    """Decode Linux/m68k bootinfo records and print one line per record."""
    config = ConfigManager(config_path)
    try:
        config.load()
    except (ConfigParserError, UnicodeDecodeError) as e:
        logger = LogManager(level=log_level or "WARNING").get_logger()
        _fail(ctx, logger, f"Cannot read config {config.config_path}: {e}")

    logger = LogManager(
        level=log_level or config.log_level,
        log_dir=config.log_dir,
    ).get_logger()
    if config.loaded:
        logger.debug(f"Loaded config from {config.config_path}")

    path = bootinfo_file or config.bootinfo_file
    fmt = output_format or config.output_format
    if fmt not in OUTPUT_FORMATS:
        logger.warning(f"Unknown output format '{fmt}' in config, using text")
        fmt = "text"

    try:
        stream = open(path, "rb")
    except OSError as e:
        _fail(ctx, logger, f"Cannot open bootinfo for reading: {e}")

    records = []
    with stream:
        decoder = BootinfoDecoder(stream)
        logger.info(f"Decoding {path}")
        try:
            for record in decoder:
                if fmt == "text":
                    click.echo(render_record(record))
                else:
                    records.append(record)
        except BootinfoError as e:
            _fail(ctx, logger, str(e))

    logger.info(f"Decoded {decoder.count} records from {path}")

    if fmt == "json":
        click.echo(json.dumps([record_to_dict(r) for r in records], indent=2))
    elif fmt == "table":
        console.print(build_table(records, title=escape(path)))


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()

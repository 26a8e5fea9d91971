"""Main CLI entry point for candlekit."""

import logging

import click

from candlekit.cli.candles import config, show, validate

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="candlekit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """candlekit - validate and inspect OHLC candle files.

    \b
    Quick Start:
      candlekit validate candles.csv             # Report invalid rows
      candlekit show candles.csv --after 1000    # Valid candles from ts 1000
      candlekit config                           # Show or create config file
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


cli.add_command(validate)
cli.add_command(show)
cli.add_command(config)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

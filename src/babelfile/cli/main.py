import click

from babelfile import __version__
from babelfile.log import setup_logging

# Import commands from modules
from babelfile.cli.files import encode, decode
from babelfile.cli.pages import page, locate


@click.group()
@click.version_option(__version__, prog_name="babelfile")
@click.option(
    "--log-level",
    envvar="BABELFILE_LOG_LEVEL",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for library diagnostics.",
)
def cli(log_level):
    """Stores files as page addresses in the Library of Babel."""
    setup_logging(log_level)


# Add file commands
cli.add_command(encode)
cli.add_command(decode)

# Add page commands
cli.add_command(page)
cli.add_command(locate)


if __name__ == "__main__":
    cli()

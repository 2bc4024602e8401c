import click

from babelfile import config
from babelfile.errors import BabelError
from babelfile.lib import address, chunker
from babelfile.lib.location import RandomCoordinateSource


@click.command("page")
@click.argument("page_address")
@click.option("--strip", is_flag=True, help="Remove trailing pad characters.")
def page(page_address, strip):
    """Prints the page stored at an address."""
    try:
        text = address.decode(page_address)
    except BabelError as e:
        raise click.ClickException(f"Invalid address: {e}")

    click.echo(chunker.strip_padding(text) if strip else text)


@click.command("locate")
@click.argument("text")
@click.option("--seed", type=int, help="Seed for coordinate selection.")
def locate(text, seed):
    """Prints an address for a page holding TEXT.

    TEXT may use lowercase letters, comma, space and period, and is padded
    with periods to a full page.
    """
    if len(text) > config.LENGTH_OF_PAGE:
        raise click.BadParameter(
            f"Text is longer than a page ({len(text)} > {config.LENGTH_OF_PAGE})",
            param_hint="TEXT",
        )

    padded = chunker.split(text)[0] if text else config.PAD_CHAR * config.LENGTH_OF_PAGE
    try:
        result = address.encode(padded, source=RandomCoordinateSource(seed))
    except BabelError as e:
        raise click.ClickException(f"Cannot locate text: {e}")

    click.echo(result)

import click
from pathlib import Path

from babelfile import config
from babelfile.errors import BabelError
from babelfile.lib.batch import BatchProcessor
from babelfile.lib.files import decode_file, encode_file
from babelfile.lib.location import RandomCoordinateSource


def _processor(workers, seed=None):
    try:
        return BatchProcessor(workers=workers, source=RandomCoordinateSource(seed))
    except ValueError as e:
        hint = "--workers" if workers is not None else config.WORKERS_ENV
        raise click.BadParameter(str(e), param_hint=hint)


@click.command("encode")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_file", required=False, type=click.Path(dir_okay=False))
@click.option("--workers", type=int, help="Number of worker threads.")
@click.option(
    "--seed",
    type=int,
    help="Seed for coordinate selection. The same seed and input give the same addresses.",
)
def encode(input_file, output_file, workers, seed):
    """Encodes a file into a .babel container of page addresses."""
    processor = _processor(workers, seed)

    click.echo("Starting encoding process...", err=True)
    try:
        output = encode_file(input_file, output_file, processor=processor)
    except (BabelError, OSError) as e:
        raise click.ClickException(f"Error encoding file: {e}")

    click.echo(f"Encoded {Path(input_file).name} to {output.name}", err=True)
    click.echo(str(output))


@click.command("decode")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_file", required=False, type=click.Path(dir_okay=False))
@click.option("--workers", type=int, help="Number of worker threads.")
def decode(input_file, output_file, workers):
    """Decodes a .babel container back into the original file."""
    processor = _processor(workers)

    click.echo("Starting decoding process...", err=True)
    try:
        output = decode_file(input_file, output_file, processor=processor)
    except (BabelError, OSError) as e:
        raise click.ClickException(f"Error decoding file: {e}")

    click.echo(f"Decoded {output.stat().st_size} bytes", err=True)
    click.echo(str(output))

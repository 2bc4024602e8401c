"""
File-level encode and decode.

Output is written only after the whole file has been processed, so a failed
operation leaves nothing behind.
"""

from pathlib import Path
from typing import Optional, Union

from babelfile import config
from babelfile.lib.batch import BatchProcessor
from babelfile.lib.container import BabelFile
from babelfile.log import get_logger, log

logger = get_logger(__name__)

PathLike = Union[str, Path]


def default_encode_output(input_path: PathLike) -> Path:
    """``report.pdf`` -> ``report.babel``"""
    return Path(input_path).with_suffix(config.CONTAINER_SUFFIX)


def default_decode_output(input_path: PathLike, extension: str) -> Path:
    """``report.babel`` + ``'pdf'`` -> ``report.pdf``; no extension -> ``report``"""
    return Path(input_path).with_suffix(f".{extension}" if extension else "")


def encode_file(
    input_path: PathLike,
    output_path: Optional[PathLike] = None,
    processor: Optional[BatchProcessor] = None,
) -> Path:
    """Encode a file into a .babel container and return the container path."""
    processor = processor or BatchProcessor()
    input_path = Path(input_path)

    log(logger, "info", "Reading input file", path=input_path)
    data = input_path.read_bytes()
    extension = input_path.suffix[1:]

    addresses = processor.encode_bytes(data)
    container = BabelFile(extension=extension, byte_length=len(data), addresses=addresses)

    output = Path(output_path) if output_path else default_encode_output(input_path)
    log(logger, "info", "Writing container", path=output, pages=len(addresses))
    return container.write(output)


def decode_file(
    input_path: PathLike,
    output_path: Optional[PathLike] = None,
    processor: Optional[BatchProcessor] = None,
) -> Path:
    """Decode a .babel container back into the original file and return its path."""
    processor = processor or BatchProcessor()
    input_path = Path(input_path)

    log(logger, "info", "Reading babel file", path=input_path)
    container = BabelFile.read(input_path)
    log(
        logger,
        "info",
        "Decoding container",
        size=container.byte_length,
        pages=len(container.addresses),
    )

    data = processor.decode_bytes(container.addresses, container.byte_length)

    output = (
        Path(output_path)
        if output_path
        else default_decode_output(input_path, container.extension)
    )
    log(logger, "info", "Writing decoded file", path=output, size=len(data))
    output.write_bytes(data)
    return output

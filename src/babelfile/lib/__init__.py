"""Codec and pipeline modules for babelfile."""

from . import address, batch, byte_text, chunker, container, files, location, page_number

__all__ = [
    "address",
    "batch",
    "byte_text",
    "chunker",
    "container",
    "files",
    "location",
    "page_number",
]

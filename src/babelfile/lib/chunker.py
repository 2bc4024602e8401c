"""Splitting Babel text into fixed-length pages and joining them back."""

from typing import Iterator, List, Sequence, Tuple

from babelfile import config


def strip_padding(page: str) -> str:
    """Remove the trailing pad characters of a page."""
    return page.rstrip(config.PAD_CHAR)


def iter_pages(text: str) -> Iterator[Tuple[int, str, bool]]:
    """Yield ``(index, page, is_final)`` for consecutive pages of ``text``.

    The last page is right-padded with ``PAD_CHAR`` to the full page length.
    Empty text yields nothing.
    """
    length = config.LENGTH_OF_PAGE
    total = -(-len(text) // length)
    for index in range(total):
        chunk = text[index * length : (index + 1) * length]
        is_final = index == total - 1
        if is_final:
            chunk = chunk.ljust(length, config.PAD_CHAR)
        yield index, chunk, is_final


def split(text: str) -> List[str]:
    """Partition text into pages of exactly LENGTH_OF_PAGE characters."""
    return [page for _, page, _ in iter_pages(text)]


def join(pages: Sequence[str]) -> str:
    """
    Concatenate decoded pages.

    Only the final page loses its trailing pad characters; a ``'.'`` at the
    end of an earlier page is content and is kept.
    """
    if not pages:
        return ""
    return "".join(pages[:-1]) + strip_padding(pages[-1])

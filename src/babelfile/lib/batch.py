"""
Whole-file encode/decode pipelines.

Pages are independent units of work; they are mapped over a thread pool and
collected in page order. Either every page succeeds or the batch raises.
"""

from functools import partial
from typing import List, Optional, Sequence, Tuple

from babelfile.errors import VerificationFailure
from babelfile.lib import address, byte_text, chunker
from babelfile.lib.location import CoordinateSource, RandomCoordinateSource
from babelfile.lib.pool import parallel_map, resolve_workers
from babelfile.log import get_logger, log

logger = get_logger(__name__)


def _encode_unit(source: CoordinateSource, item: Tuple[int, str]) -> Tuple[str, str]:
    index, page = item
    return page, address.encode(page, source=source, index=index)


def _verify_unit(item: Tuple[str, str]) -> bool:
    page, addr = item
    return address.verify(page, addr)


class BatchProcessor:
    """Applies the address codec to every page of a file."""

    def __init__(
        self,
        workers: Optional[int] = None,
        source: Optional[CoordinateSource] = None,
    ):
        self.workers = resolve_workers(workers)
        self.source = source or RandomCoordinateSource()

    def encode_pages(self, pages: Sequence[str]) -> List[Tuple[str, str]]:
        """
        Address every page and return ``(page, address)`` pairs in page order.

        Each address is checked as it is produced, then the whole list is
        verified again in a second pass.

        Raises:
            VerificationFailure: any address fails to regenerate its page.
        """
        log(logger, "info", "Finding locations for pages", pages=len(pages), workers=self.workers)
        located = parallel_map(
            partial(_encode_unit, self.source), enumerate(pages), self.workers
        )

        log(logger, "info", "Verifying all pages", pages=len(located))
        results = parallel_map(_verify_unit, located, self.workers)
        failed = [i for i, ok in enumerate(results) if not ok]
        if failed:
            raise VerificationFailure(
                f"Page verification failed for {len(failed)} page(s), first index {failed[0]}"
            )
        return located

    def decode_addresses(self, addresses: Sequence[str]) -> List[str]:
        """Regenerate the pages for a list of addresses, in order."""
        log(logger, "info", "Decoding pages", pages=len(addresses), workers=self.workers)
        return parallel_map(address.decode, addresses, self.workers)

    def encode_bytes(self, data: bytes) -> List[str]:
        """Turn raw bytes into the ordered list of page addresses."""
        log(logger, "info", "Converting to babel text", size=len(data))
        text = byte_text.encode(data, self.workers)

        # The transcription must round-trip before anything is paged.
        if byte_text.decode(text, self.workers) != data:
            raise VerificationFailure("Initial byte/text conversion did not round-trip")

        pages = chunker.split(text)
        return [addr for _, addr in self.encode_pages(pages)]

    def decode_bytes(self, addresses: Sequence[str], byte_length: int) -> bytes:
        """Turn an ordered list of page addresses back into ``byte_length`` bytes."""
        pages = self.decode_addresses(addresses)
        text = chunker.join(pages)
        data = byte_text.decode(text, self.workers)

        log(logger, "info", "Converted to bytes", expected=byte_length, decoded=len(data))
        if len(data) < byte_length:
            log(logger, "warning", "Decoded fewer bytes than recorded", missing=byte_length - len(data))
        return data[:byte_length]

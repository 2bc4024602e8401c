"""
The .babel container format.

A container is plain text, one record per line::

    line 1     original file extension (may be empty)
    line 2     original byte length (decimal)
    line 3..N  one address per page, in page order
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from babelfile.errors import ContainerFormatError


@dataclass
class BabelFile:
    extension: str
    byte_length: int
    addresses: List[str] = field(default_factory=list)

    def dumps(self) -> str:
        lines = [self.extension, str(self.byte_length)] + list(self.addresses)
        return "\n".join(lines) + "\n"

    @classmethod
    def loads(cls, text: str) -> "BabelFile":
        """
        Parse container text.

        Raises:
            ContainerFormatError: the extension or byte length line is
                missing, or the length is not a non-negative integer.
        """
        lines = text.splitlines()
        if not lines:
            raise ContainerFormatError("File is empty")
        if len(lines) < 2:
            raise ContainerFormatError("Missing byte length line")

        extension = lines[0].strip()
        length_line = lines[1].strip()
        if not length_line.isascii() or not length_line.isdigit():
            raise ContainerFormatError(f"Invalid file size: {length_line[:32]!r}")

        addresses = [line.strip() for line in lines[2:] if line.strip()]
        return cls(extension=extension, byte_length=int(length_line), addresses=addresses)

    def write(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(self.dumps())
        return path

    @classmethod
    def read(cls, path: Union[str, Path]) -> "BabelFile":
        with open(path, "r", encoding="utf-8") as f:
            return cls.loads(f.read())

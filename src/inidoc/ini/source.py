# -*- encoding: utf-8 -*-
# @File   : source.py
# @Time   : 2026/10/17 14:40:03
# @Author : inidoc contributors

"""Line reading for the INI parser.

A `LineSource` yields trimmed, numbered lines, with blank lines and
`;` comments already dropped. `#` comments are NOT dropped here,
as whether they are comments depends on the document.
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike, fspath
from typing import Iterator, NamedTuple

from chardet import detect as guess_codec

from ..errors import IniFileOpenError
from .consts import CODEC_CONFIDENCE, COMMENT_MARK

logger = logging.getLogger(__name__)


class SourceLine(NamedTuple):
    lineno: int  # 1-based, counts blank and comment lines too
    text: str


def decode_bytes(raw: bytes, encoding: str | None = None) -> str:
    """Decode file content, guessing the codec if needed.

    Tries `encoding` first. On failure (or if not given),
    ask `chardet`, then fallback to `gbk` and finally `latin-1`.
    """
    if encoding is not None:
        try:
            return raw.decode(encoding).lstrip('\ufeff')
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug('decoding as %s failed (%s), guessing codec',
                         encoding, e)

    codec = guess_codec(raw)
    guessed = codec.get('encoding')
    if guessed is None or codec.get('confidence', 0) < CODEC_CONFIDENCE:
        guessed = 'utf-8'
    for i in (guessed, 'gbk'):
        try:
            return raw.decode(i).lstrip('\ufeff')
        except (UnicodeDecodeError, LookupError):
            continue
    # latin-1 maps every byte, never fails.
    return raw.decode('latin-1')


class LineSource:
    """Iterate a text buffer as `SourceLine`s.

    Usage:
        ```python
        with LineSource.open('config.ini') as src:
            for lineno, text in src:
                ...
        ```
    """
    def __init__(self, buffer: TextIOBase, name: str = '<string>') -> None:
        self._buf = buffer
        self._name = name
        self._lineno = 0

    @classmethod
    def open(
        cls, path: str | PathLike[str], encoding: str | None = None
    ) -> 'LineSource':
        """Read a file into a source.

        The file handle is closed before returning.

        Raises:
            IniFileOpenError: if the file is missing or unreadable.
        """
        path = fspath(path)
        try:
            with open(path, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            raise IniFileOpenError(path, e.strerror or e) from e
        return cls(StringIO(decode_bytes(raw, encoding), newline=None), path)

    @classmethod
    def from_string(cls, text: str, name: str = '<string>') -> 'LineSource':
        return cls(StringIO(text, newline=None), name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def lineno(self) -> int:
        """Number of the last line read, `0` before reading."""
        return self._lineno

    @property
    def closed(self) -> bool:
        return self._buf.closed

    def __iter__(self) -> Iterator[SourceLine]:
        while (i := self._buf.readline()):
            self._lineno += 1
            line = i.strip()
            if not line or line.startswith(COMMENT_MARK):
                continue
            yield SourceLine(self._lineno, line)

    def close(self) -> None:
        if not self._buf.closed:
            self._buf.close()

    def __enter__(self) -> 'LineSource':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __str__(self) -> str:
        return self._name

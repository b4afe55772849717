# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/17 15:12:58
# @Author : inidoc contributors

"""INI reading & writing.

Only the plain dialect is supported:

    ```ini
    ; comment, always
    # comment, if `IniDocument.allow_hash_comments`
    key=value      ; goes to [DEFAULT] before any header
    [section]
    url=a=b        ; split on the LAST `=`, key "url=a", value "b"
    ```

No inline comments, no multi-line values, no interpolation.
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike, fspath
from typing import Iterable

from ..abstract import FileHandler
from ..errors import DuplicateSectionAbort, IniError, MalformedLineError
from .consts import DEFAULT_SECTION, HASH_COMMENT_MARK, DuplicatePolicy
from .model import IniDocument
from .source import LineSource, SourceLine

logger = logging.getLogger(__name__)


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        """`encoding=None` lets `chardet` guess it when reading,
        and means utf-8 when writing."""
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readlines(
        lines: Iterable[SourceLine], doc: IniDocument | None = None
    ) -> IniDocument:
        """Apply numbered lines onto `doc` (or a new document).

        Raises:
            MalformedLineError: a line is neither header nor `key=value`.
            DuplicateSectionAbort: section redeclared under `ABORT` policy.
        """
        if doc is None:
            doc = IniDocument()
        this_sect, _ = doc.declare_section(DEFAULT_SECTION, True)
        for lineno, line in lines:
            if doc.allow_hash_comments and line.startswith(HASH_COMMENT_MARK):
                continue
            if line.startswith('[') and line.endswith(']'):
                handle, outcome = doc.declare_section(line[1:-1])
                if outcome is DuplicatePolicy.ABORT:
                    raise DuplicateSectionAbort(lineno, line[1:-1])
                if outcome is DuplicatePolicy.IGNORE:
                    logger.debug('line %d: ignored duplicate section %s',
                                 lineno, line)
                    continue
                this_sect = handle
                continue
            key, sep, val = line.rpartition('=')
            if not sep:
                raise MalformedLineError(lineno, line)
            outcome = doc.declare_property(this_sect, key, val)
            if outcome is not DuplicatePolicy.NONE:
                logger.debug('line %d: duplicate key "%s", %s',
                             lineno, key, outcome.value)
        return doc

    @classmethod
    def readstream(
        cls, buf: TextIOBase, doc: IniDocument | None = None
    ) -> IniDocument:
        """Read an already decoded text stream. `buf` is left open.

        If there is no special need, just call `self.read()`.
        """
        src = LineSource(buf, getattr(buf, 'name', '<stream>'))
        return cls.readlines(src, doc)

    def read(self, doc: IniDocument | None = None) -> IniDocument:
        """Read the file this parser is bound to.

        Raises:
            IniFileOpenError: file missing or unreadable.
            MalformedLineError, DuplicateSectionAbort: see `readlines()`.
        """
        with LineSource.open(self._fn, self._codec) as src:
            return self.readlines(src, doc)

    def write(self, instance: IniDocument) -> bool:
        """Save as a plain INI file.

        Returns `False` (and logs) if the file cannot be written.
        """
        return write(instance, self._fn, self._codec or 'utf-8')

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f" ({self._codec})"


def parse(doc: IniDocument, source: LineSource | str | PathLike[str]) -> bool:
    """Parse `source` (an opened `LineSource` or a path) into `doc`.

    Failures are logged rather than raised, and `False` returned.
    Parsing stops at the first error, so `doc` keeps whatever got
    applied before it.
    """
    try:
        if isinstance(source, LineSource):
            with source:
                IniParser.readlines(source, doc)
        else:
            IniParser(source).read(doc)
    except IniError as e:
        logger.warning('failed to parse %s: %s', source, e)
        return False
    return True


def loads(text: str, doc: IniDocument | None = None) -> IniDocument:
    """Parse INI text. Raises like `IniParser.readlines()`."""
    with LineSource.from_string(text) as src:
        return IniParser.readlines(src, doc)


def load(
    path: str | PathLike[str],
    doc: IniDocument | None = None,
    encoding: str | None = None
) -> IniDocument:
    return IniParser(path, encoding).read(doc)


def dump(doc: IniDocument, *, pairing: str = '=', blanklines: int = 1) -> str:
    """Render `doc` as INI text.

    Tombstoned and empty sections are omitted.
    Comments are never kept, as they aren't in the model.
    Pairs added through `declare_property()` skip the checks
    `set_value()` does, and may not read back the same.
    """
    buf = StringIO()
    for sect, pairs in doc.to_dict().items():
        buf.write(f'[{sect}]\n')
        for key, val in pairs.items():
            buf.write(f'{key}{pairing}{val}\n')
        buf.write('\n' * blanklines)
    return buf.getvalue()


def write(
    doc: IniDocument, path: str | PathLike[str], encoding: str = 'utf-8'
) -> bool:
    path = fspath(path)
    text = dump(doc)
    try:
        with open(path, 'w', encoding=encoding, newline='\n') as fp:
            fp.write(text)
    except (OSError, UnicodeEncodeError) as e:
        logger.warning('failed to write %s: %s', path, e)
        return False
    return True

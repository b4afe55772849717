# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/17 14:05:37
# @Author : inidoc contributors


class IniError(Exception):
    """Base class for inidoc errors."""


class IniFileOpenError(IniError, OSError):
    """Raised when an INI source cannot be opened or read."""
    def __init__(self, path: str, reason: object = None) -> None:
        self.path = path
        self.reason = reason
        msg = f'cannot open "{path}"'
        if reason is not None:
            msg += f': {reason}'
        super().__init__(msg)


class IniFormatError(IniError, ValueError):
    """Raised when INI input is malformed."""


class MalformedLineError(IniFormatError):
    """A non-comment, non-header line without any `=`."""
    def __init__(self, lineno: int, line: str) -> None:
        self.lineno = lineno
        self.line = line
        super().__init__(f'line {lineno}: expected "key=value", got {line!r}')


class DuplicateSectionAbort(IniFormatError):
    """A section got redeclared while the document policy is ABORT."""
    def __init__(self, lineno: int, name: str) -> None:
        self.lineno = lineno
        self.name = name
        super().__init__(f'line {lineno}: section [{name}] redeclared, aborted')

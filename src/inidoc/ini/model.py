# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/17 14:11:46
# @Author : inidoc contributors

"""
Basically INI structure, sections in an arena.

Sections are never removed from the arena, only tombstoned,
so a `SectionHandle` (the arena index) someone holds stays valid.
As for reading and writing files, just see `ini.parser`.
"""

from collections.abc import Mapping
from typing import Iterator, NamedTuple, NewType
from warnings import warn

from ..errors import IniFormatError
from .consts import (
    COMMENT_MARK,
    DEFAULT_SECTION,
    HASH_COMMENT_MARK,
    DuplicatePolicy
)

SectionHandle = NewType('SectionHandle', int)

_TRUTHY = frozenset(('1', 'yes', 'true', 'on'))
_FALSY = frozenset(('0', 'no', 'false', 'off'))
_LINEBREAKS = frozenset('\r\n')


class IniProperty(NamedTuple):
    key: str
    value: str


class IniSection:
    """One `[name]` block. Only `IniDocument` should touch this directly."""
    __slots__ = ('name', 'tombstoned', 'pairs')

    def __init__(self, name: str) -> None:
        self.name = name
        self.tombstoned = False
        # dict keeps insertion order, and keys unique.
        self.pairs: dict[str, str] = {}

    def __repr__(self) -> str:
        dead = ' (tombstoned)' if self.tombstoned else ''
        return '[%s] { .cnt = %d }%s' % (self.name, len(self.pairs), dead)


class IniSectionView(Mapping[str, str]):
    """Read-only view of a section.

    Keys get folded the same way the owning document folds them,
    so `view['Key']` works on a case insensitive document.
    """
    def __init__(self, section: IniSection, doc: 'IniDocument') -> None:
        self.__sect = section
        self.__doc = doc

    @property
    def name(self) -> str:
        return self.__sect.name

    @property
    def tombstoned(self) -> bool:
        return self.__sect.tombstoned

    def __getitem__(self, key: str) -> str:
        return self.__sect.pairs[self.__doc.fold_key(key)]

    def __contains__(self, key: object) -> bool:
        return (isinstance(key, str)
                and self.__doc.fold_key(key) in self.__sect.pairs)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sect.pairs)

    def __len__(self) -> int:
        return len(self.__sect.pairs)

    def __str__(self) -> str:
        return f'[{self.__sect.name}]'

    def __repr__(self) -> str:
        return repr(self.__sect)

    def properties(self) -> list[IniProperty]:
        """Copy of the pairs, in insertion order."""
        return [IniProperty(k, v) for k, v in self.__sect.pairs.items()]


class IniDocument:
    """A whole INI file. Always holds a `[DEFAULT]` section.

    Options:
        case_sensitive: if `False`, section names and keys are lower-cased
            on insertion and on lookup (the section name `DEFAULT` is exempt).
        allow_hash_comments: whether `#` lines are comments besides `;`.
        duplicate_policy: what to do on redeclared sections or keys.
    """
    def __init__(
        self, *,
        case_sensitive: bool = False,
        allow_hash_comments: bool = True,
        duplicate_policy: DuplicatePolicy | str = DuplicatePolicy.OVERRIDE
    ) -> None:
        self.case_sensitive = case_sensitive
        self.allow_hash_comments = allow_hash_comments
        self.duplicate_policy = duplicate_policy
        self.__arena: list[IniSection] = []
        self.declare_section(DEFAULT_SECTION)

    @property
    def duplicate_policy(self) -> DuplicatePolicy:
        return self.__policy

    @duplicate_policy.setter
    def duplicate_policy(self, value: DuplicatePolicy | str) -> None:
        self.__policy = DuplicatePolicy(value)

    def fold_section(self, name: str) -> str:
        if self.case_sensitive or name == DEFAULT_SECTION:
            return name
        return name.lower()

    def fold_key(self, key: str) -> str:
        return key if self.case_sensitive else key.lower()

    def __slot(self, section: SectionHandle | str) -> IniSection | None:
        if isinstance(section, str):
            handle = self.find_section(section)
            return None if handle is None else self.__arena[handle]
        if 0 <= section < len(self.__arena):
            return self.__arena[section]
        return None

    def find_section(self, name: str) -> SectionHandle | None:
        """Handle of the active section called `name`, or `None`."""
        name = self.fold_section(name)
        for idx, sect in enumerate(self.__arena):
            if not sect.tombstoned and sect.name == name:
                return SectionHandle(idx)
        return None

    def section(self, section: SectionHandle | str) -> IniSectionView:
        """Read-only view of a section.

        A handle keeps resolving even after its section got tombstoned,
        while a name only matches active sections.
        """
        sect = self.__slot(section)
        if sect is None:
            raise KeyError(section)
        return IniSectionView(sect, self)

    def declare_section(
        self, name: str, get_or_create: bool = False
    ) -> tuple[SectionHandle | None, DuplicatePolicy]:
        """Resolve a section declaration against `duplicate_policy`.

        Returns a `(handle, outcome)` tuple. The handle is `None`
        when the outcome is `IGNORE` or `ABORT`.
        `get_or_create` skips the policy and reuses an existing section.
        """
        handle = self.find_section(name)
        if handle is not None:
            if get_or_create:
                return handle, DuplicatePolicy.OVERRIDE
            match self.duplicate_policy:
                case DuplicatePolicy.ABORT | DuplicatePolicy.IGNORE:
                    return None, self.duplicate_policy
                case _:
                    return handle, self.duplicate_policy
        self.__arena.append(IniSection(self.fold_section(name)))
        return SectionHandle(len(self.__arena) - 1), DuplicatePolicy.OVERRIDE

    def declare_property(
        self, section: SectionHandle, key: str, value: str
    ) -> DuplicatePolicy:
        """Add `key=value` to a section.

        An existing key only gets replaced under `OVERRIDE`,
        though the policy is returned as outcome anyway.
        A fresh key returns `NONE`.
        """
        sect = self.__slot(section)
        if sect is None or sect.tombstoned:
            raise KeyError(section)
        key = self.fold_key(key)
        if key in sect.pairs:
            if self.duplicate_policy is DuplicatePolicy.OVERRIDE:
                sect.pairs[key] = value
            return self.duplicate_policy
        sect.pairs[key] = value
        return DuplicatePolicy.NONE

    def tombstone(self, section: SectionHandle | str) -> bool:
        """Mark a section dead. Its slot (and handle) stays.

        Returns `False` if the section is unknown, already dead,
        or is `DEFAULT`, which cannot be removed.
        """
        sect = self.__slot(section)
        if sect is None or sect.tombstoned:
            return False
        if sect.name == DEFAULT_SECTION:
            warn('[DEFAULT] cannot be tombstoned; try clearing it instead.')
            return False
        sect.tombstoned = True
        return True

    def clear(self) -> None:
        for sect in self.__arena:
            if sect.name == DEFAULT_SECTION and not sect.tombstoned:
                sect.pairs.clear()
            else:
                sect.tombstoned = True

    # accessors

    def get_value(
        self, section: SectionHandle | str, key: str
    ) -> tuple[str, bool]:
        sect = self.__slot(section)
        if sect is None or sect.tombstoned:
            return '', False
        key = self.fold_key(key)
        if key not in sect.pairs:
            return '', False
        return sect.pairs[key], True

    def get_int(
        self, section: SectionHandle | str, key: str
    ) -> tuple[int, bool]:
        value, found = self.get_value(section, key)
        if not found:
            return 0, False
        try:
            return int(value), True
        except ValueError:
            return 0, False

    def get_float(
        self, section: SectionHandle | str, key: str
    ) -> tuple[float, bool]:
        value, found = self.get_value(section, key)
        if not found:
            return 0.0, False
        try:
            return float(value), True
        except ValueError:
            return 0.0, False

    def get_bool(
        self, section: SectionHandle | str, key: str
    ) -> tuple[bool, bool]:
        value, found = self.get_value(section, key)
        value = value.strip().lower()
        if found and value in _TRUTHY:
            return True, True
        return False, found and value in _FALSY

    def check_writable(
        self, section: SectionHandle | str, key: str, value: str
    ) -> None:
        """Reject pairs the line format cannot carry.

        The parser splits on the LAST `=`, so a value must not hold one;
        a key must not look like a header or a comment.
        """
        if isinstance(section, str) and _LINEBREAKS & set(section):
            raise IniFormatError(f'line break in section name {section!r}')
        if _LINEBREAKS & set(key + value):
            raise IniFormatError(f'line break in {key!r}={value!r}')
        if '=' in value:
            raise IniFormatError(f'"=" in value of {key!r}: {value!r}')
        marks = ('[', COMMENT_MARK)
        if self.allow_hash_comments:
            marks += (HASH_COMMENT_MARK,)
        if key.lstrip().startswith(marks):
            raise IniFormatError(f'key {key!r} reads as header or comment')

    def set_value(
        self, section: SectionHandle | str, key: str, value: object
    ) -> DuplicatePolicy:
        """Get-or-create the section, then declare `key=value` in it.

        Raises:
            IniFormatError: if the pair could not be read back from
                `dump()` output as is.
        """
        value = str(value)
        self.check_writable(section, key, value)
        if isinstance(section, str):
            handle, _ = self.declare_section(section, get_or_create=True)
        else:
            handle = section
        return self.declare_property(handle, key, value)

    # container-ish access over active sections

    def sections(self) -> list[str]:
        return [i.name for i in self.__arena if not i.tombstoned]

    def handles(self) -> list[SectionHandle]:
        return [SectionHandle(idx) for idx, i in enumerate(self.__arena)
                if not i.tombstoned]

    def items(self) -> Iterator[tuple[str, str, str]]:
        """Iterate `(section, key, value)` triples in document order."""
        for sect in self.__arena:
            if sect.tombstoned:
                continue
            for k, v in sect.pairs.items():
                yield sect.name, k, v

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Copy of every active, non-empty section."""
        return {i.name: i.pairs.copy() for i in self.__arena
                if not i.tombstoned and i.pairs}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find_section(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.sections())

    def __len__(self) -> int:
        return len(self.sections())

    def __repr__(self) -> str:
        return '<%s: %d sections, policy=%s>' % (
            self.__class__.__name__, len(self), self.duplicate_policy.value)

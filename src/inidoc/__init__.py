# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/17 16:22:10
# @Author : inidoc contributors

import logging

from .errors import (
    IniError,
    IniFileOpenError,
    IniFormatError,
    MalformedLineError,
    DuplicateSectionAbort
)
from .ini import (
    DEFAULT_SECTION,
    DuplicatePolicy,
    IniDocument,
    IniProperty,
    IniSectionView,
    SectionHandle,
    LineSource,
    SourceLine,
    IniParser,
    IniYamlParser,
    dump,
    load,
    loads,
    parse,
    write
)

__all__ = [
    'IniError', 'IniFileOpenError', 'IniFormatError',
    'MalformedLineError', 'DuplicateSectionAbort',
    'DEFAULT_SECTION', 'DuplicatePolicy',
    'IniDocument', 'IniProperty', 'IniSectionView', 'SectionHandle',
    'LineSource', 'SourceLine',
    'IniParser', 'IniYamlParser',
    'dump', 'load', 'loads', 'parse', 'write'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')

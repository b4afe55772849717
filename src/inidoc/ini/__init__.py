# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/17 16:20:45
# @Author : inidoc contributors

from .consts import DEFAULT_SECTION, DuplicatePolicy
from .model import IniDocument, IniProperty, IniSectionView, SectionHandle
from .source import LineSource, SourceLine
from .parser import IniParser, dump, load, loads, parse, write
from .exchange import IniYamlParser

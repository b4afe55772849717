# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/17 14:08:20
# @Author : inidoc contributors

from enum import Enum


class DuplicatePolicy(str, Enum):
    NONE = 'none'
    IGNORE = 'ignore'
    OVERRIDE = 'override'
    ABORT = 'abort'


DEFAULT_SECTION = 'DEFAULT'

COMMENT_MARK = ';'
HASH_COMMENT_MARK = '#'

# chardet results below this are not trusted.
CODEC_CONFIDENCE = 0.8

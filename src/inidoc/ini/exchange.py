# -*- encoding: utf-8 -*-
# @File   : exchange.py
# @Time   : 2026/10/17 16:03:31
# @Author : inidoc contributors

"""INI <-> YAML.

The YAML side is a plain mapping of mappings:

    ```yaml
    DEFAULT:
      key: value
    section:
      url: a=b
    ```

Only active, non-empty sections get exported, same as `parser.dump()`.
"""

import logging
from os import PathLike

import yaml

from ..abstract import FileHandler
from ..errors import IniFileOpenError, IniFormatError
from .model import IniDocument

logger = logging.getLogger(__name__)


def _scalar(value: object) -> str:
    # pyyaml may hand out int, float, bool, dates or None for scalars.
    if isinstance(value, (list, dict)):
        raise IniFormatError(
            f'expected a scalar, got {type(value).__name__}: {value!r}')
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


class IniYamlParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def from_mapping(
        data: object, doc: IniDocument | None = None
    ) -> IniDocument:
        """Apply `{section: {key: value}}` onto `doc` via `set_value()`.

        Raises:
            IniFormatError: if `data` is not a mapping of mappings of
                scalars, or a pair cannot be written as INI.
        """
        if doc is None:
            doc = IniDocument()
        if data is None:
            return doc
        if not isinstance(data, dict):
            raise IniFormatError(
                f'expected a mapping of sections, got {type(data).__name__}')
        for sect, pairs in data.items():
            if pairs is None:
                doc.declare_section(_scalar(sect), get_or_create=True)
                continue
            if not isinstance(pairs, dict):
                raise IniFormatError(
                    f'section "{sect}" should be a mapping, '
                    f'got {type(pairs).__name__}')
            for k, v in pairs.items():
                doc.set_value(_scalar(sect), _scalar(k), _scalar(v))
        return doc

    def read(self, doc: IniDocument | None = None) -> IniDocument:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                data = yaml.safe_load(fp)
        except OSError as e:
            raise IniFileOpenError(self._fn, e.strerror or e) from e
        except yaml.YAMLError as e:
            raise IniFormatError(f'{self._fn}: {e}') from e
        return self.from_mapping(data, doc)

    def write(self, instance: IniDocument) -> bool:
        """Convert to yaml file. Returns `False` if it cannot be written."""
        try:
            with open(self._fn, 'w', encoding=self._codec) as fp:
                yaml.safe_dump(
                    instance.to_dict(), fp,
                    sort_keys=False,
                    allow_unicode=True,
                    default_flow_style=False)
        except OSError as e:
            logger.warning('failed to write %s: %s', self._fn, e)
            return False
        return True

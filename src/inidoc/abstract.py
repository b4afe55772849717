# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/17 14:02:11
# @Author : inidoc contributors

from abc import ABCMeta, abstractmethod
from os import PathLike, fspath
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str | PathLike[str]) -> None:
        self._fn = fspath(filename)

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> bool:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn

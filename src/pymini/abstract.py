# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/10/12 20:31:17
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Reads and writes a `T` from/to one text file.

    The encoding is never guessed. Pass the right one, or get
    `UnicodeDecodeError` on reading.
    """
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        self._fn = filename
        self._codec = encoding

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return f'{self._fn} ({self._codec})'

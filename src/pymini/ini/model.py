# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/13 17:20:46
# @Author : Kariko Lin

"""
Basically INI Structure with nested (`/` separated) sections.

`IniReader` itself never remembers which section we are in,
so `IniDocumentBuilder` does that part and fills an `IniDocument`.
"""

from collections.abc import Iterable, MutableMapping
from typing import Iterator
from warnings import warn

from .lines import LineResult, parse
from .reader import PATH_SEP, IniReader

__all__ = ['IniSection', 'IniDocument', 'IniDocumentBuilder']


class IniSection(MutableMapping[str, str]):
    """Key-value pairs of one section, named by its full path.

    All pairs *should* be `str: str` (even an empty value),
    but in runtime we wouldn't limit that much.
    """
    def __init__(
        self, name: str, pairs: MutableMapping[str, str] | None = None
    ) -> None:
        self.name = name
        self._data: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f'[{self.name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self.name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class IniDocument(MutableMapping[str, IniSection]):
    """INI file representation.

        ```ini
        key = val     ; pairs before any section go to `self.header`.

        [server]
        host=localhost
        [server/db]   ; also recorded as a subsection of `server`.
        port=5432
        ```

    Sections are keyed by their canonical path, i.e. `[ a / b ]` is `a/b`.
    """
    def __init__(self) -> None:
        # section declaration is unable to contain line breaks.
        self.__header = IniSection('\n')
        self.__sections: dict[str, IniSection] = {}
        # parent path (None for top level) -> child paths, first seen first.
        self.__children: dict[str | None, list[str]] = {}
        self.comments: list[str] = []

    @property
    def header(self) -> IniSection:
        """Pairs not belonging to any section."""
        return self.__header

    def __getitem__(self, key: str) -> IniSection:
        return self.__sections[key]

    def __setitem__(
        self, key: str, value: IniSection | MutableMapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict.
        self.__sections[key] = IniSection(key, dict(value))

    def __delitem__(self, key: str) -> None:
        del self.__sections[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return f'<IniDocument {list(self.__sections)!r}>'

    def setdefault(self, key: str, default=None) -> IniSection:
        """Get the section at `key`, creating it (from `default`) first
        if it doesn't exist yet."""
        if key not in self.__sections:
            self[key] = default or {}
        return self.__sections[key]

    def clear(self) -> None:
        self.__header.clear()
        self.__sections.clear()
        self.__children.clear()
        self.comments.clear()

    def add_subsection(self, path: str) -> None:
        """Register `path` under its parent path in the subsection tree."""
        parent = path.rpartition(PATH_SEP)[0] if PATH_SEP in path else None
        children = self.__children.setdefault(parent, [])
        if path not in children:
            children.append(path)

    def subsections(self, path: str | None = None) -> list[str]:
        """Direct child paths of `path`. `None` for the top level."""
        return list(self.__children.get(path, []))


class IniDocumentBuilder(IniReader):
    """Collects the lines it classifies into an `IniDocument`.

    Unlike `IniReader`, a builder *remembers* the current section,
    so use one builder per document (and per thread).
    """
    def __init__(self, document: IniDocument | None = None) -> None:
        self.document = IniDocument() if document is None else document
        self.unrecognized: list[LineResult] = []
        self._current = self.document.header

    def on_comment(self, line: str) -> None:
        self.document.comments.append(line)

    def on_section(self, path: str) -> None:
        # a repeated header just reopens the same section.
        self._current = self.document.setdefault(path)

    def on_sub_section(self, name: str, path: str) -> None:
        self.document.add_subsection(path)

    def on_key_value(self, key: str, value: str) -> None:
        if key in self._current and self._current[key] != value:
            where = (
                'header' if self._current is self.document.header
                else str(self._current))
            warn(
                f'{where} 中 "{key}" 重复出现，'
                f'已用后者 "{value}" 覆盖 "{self._current[key]}"。')
        self._current[key] = value

    def feed(self, lines: Iterable[str] | str) -> IniDocument:
        for i in parse(lines, self):
            if not i.recognized:
                self.unrecognized.append(i)
        return self.document

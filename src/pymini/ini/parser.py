# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/13 19:04:51
# @Author : Kariko Lin

"""File handlers of `IniDocument`.

Note: comments are kept in `IniDocument.comments` after reading,
but they are *not* written back, since we don't know where they were.
"""

import logging
from io import TextIOBase
from typing import Iterator, TypedDict
from warnings import warn

import yaml

from ..abstract import FileHandler
from .lines import LineResult, parse
from .model import IniDocument, IniDocumentBuilder, IniSection

__all__ = [
    'IniParser', 'IniYamlParser',
    'InvalidIniLine', 'InvalidYamlDocument',
    'LineResult', 'parse'
]


class InvalidIniLine(ValueError):
    """To record the unrecognized line in strict reading."""
    def __init__(self, lineno: int, line: str) -> None:
        super().__init__(f'第 {lineno} 行不是有效的 INI 行：{line!r}')
        self.lineno = lineno
        self.line = line


class InvalidYamlDocument(ValueError):
    pass


class IniParser(FileHandler[IniDocument]):
    @staticmethod
    def _lines(buf: TextIOBase) -> Iterator[str]:
        # `open()` has already turned CRLF and CR into LF.
        # `str.splitlines()` would also break at `\x0c`, U+2028, ...
        for i in buf:
            yield i.removesuffix('\n').removesuffix('\r')

    @staticmethod
    def readstream(buf: TextIOBase, *, strict: bool = False) -> IniDocument:
        """Read from a decoded text stream.

        Unrecognized lines are skipped with a warning log,
        or raise `InvalidIniLine` if `strict`.
        """
        builder = IniDocumentBuilder()
        for i in parse(IniParser._lines(buf), builder):
            if i.recognized:
                continue
            if strict:
                raise InvalidIniLine(i.lineno, i.line)
            logging.warning(f'skipped line {i.lineno}: {i.line!r}')
            builder.unrecognized.append(i)
        return builder.document

    def read(self, *, strict: bool = False) -> IniDocument:
        """Read the file this `IniParser` points to.

        CAUTION:
            May raise `OSError` or `UnicodeDecodeError`.
        """
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return self.readstream(fp, strict=strict)

    @staticmethod
    def _check_pair(section: str, key: str, value: str) -> None:
        # no escaping here, so just tell what would be lost.
        if (
            '=' in key or '\n' in key or '\r' in key
            or key.startswith(('#', ';', '['))
        ):
            warn(
                f'{section} 中的键 {key!r} 含有 "="、换行，或以 "#"、";"、"[" 开头，'
                '写入后将无法按原样读回。')
        if '=' in value or '\n' in value or '\r' in value:
            warn(
                f'{section} 中 {key!r} 的值 {value!r} 含有 "=" 或换行，'
                '写入后读回时会被截断。')

    @staticmethod
    def _pairs2str(pairs: IniSection, where: str, delimiter: str) -> str:
        for k, v in pairs.items():
            IniParser._check_pair(where, k, v)
        return ''.join(f'{k}{delimiter}{v}\n' for k, v in pairs.items())

    def write(
        self, instance: IniDocument, *,
        blank_lines: int = 1,
        delimiter: str = '='
    ) -> None:
        """Save as an INI file.

        Args:
            blank_lines: how many lines between sections?
            delimiter: how to connect key with value?
        """
        with open(self._fn, 'w', encoding=self._codec) as fp:
            if instance.header:
                fp.write(self._pairs2str(
                    instance.header, 'header', delimiter))
                fp.write('\n' * blank_lines)
            for cnt, (path, section) in enumerate(instance.items()):
                if cnt:
                    fp.write('\n' * blank_lines)
                fp.write(f'[{path}]\n')
                fp.write(self._pairs2str(section, str(section), delimiter))

    def __str__(self) -> str:
        return 'INI: ' + super().__str__()


class _YamlDocument(TypedDict):
    header: dict[str, str]
    sections: dict[str, dict[str, str]]


class IniYamlParser(FileHandler[IniDocument]):
    """Exports an `IniDocument` to YAML (and back).

        ```yaml
        header:
          key: val
        sections:
          server/db:
            port: '5432'
        ```
    """
    @staticmethod
    def __to_pairs(data: object, where: str) -> dict[str, str]:
        if data is None:  # `server/db:` with nothing below
            return {}
        if not isinstance(data, dict):
            raise InvalidYamlDocument(f'"{where}" 应为映射，而不是 {data!r}。')
        # may there be some pure digits (or bools) loaded as non-str.
        return {
            str(k): '' if v is None else str(v) for k, v in data.items()
        }

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            src = yaml.safe_load(fp)
        if src is None:
            src = {}
        if not isinstance(src, dict):
            raise InvalidYamlDocument(f'{self._fn} 的根节点不是映射。')

        ret = IniDocument()
        ret.header.update(self.__to_pairs(src.get('header'), 'header'))
        sections = src.get('sections') or {}
        if not isinstance(sections, dict):
            raise InvalidYamlDocument('"sections" 应为映射。')
        builder = IniDocumentBuilder(ret)
        for path, pairs in sections.items():
            # let the builder normalize the path and rebuild the tree.
            builder.classify(f'[{path}]')
            for k, v in self.__to_pairs(pairs, str(path)).items():
                builder.on_key_value(k, v)
        return ret

    def write(self, instance: IniDocument) -> None:
        ret = _YamlDocument(
            header=instance.header.to_dict(),
            sections={k: v.to_dict() for k, v in instance.items()})
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(ret, fp, allow_unicode=True, sort_keys=False)

    def __str__(self) -> str:
        return 'YAML: ' + super().__str__()

# -*- encoding: utf-8 -*-
# @File   : lines.py
# @Time   : 2024/10/13 16:55:02
# @Author : Kariko Lin

import logging
import re
from collections.abc import Iterable
from typing import Iterator, NamedTuple

from .reader import IniReader

__all__ = ['LineResult', 'parse']

# unlike `str.splitlines()`, form feeds, U+2028 and so on are kept.
LINE_BREAK = re.compile(r'\r\n|\r|\n')


class LineResult(NamedTuple):
    lineno: int  # 1-based.
    line: str
    recognized: bool


def parse(
    lines: Iterable[str] | str,
    reader: IniReader | None = None
) -> Iterator[LineResult]:
    """Feed `lines` to `reader` one by one, lazily.

    Each `LineResult` is yielded after the hooks of that line have fired.
    A plain `str` would be split on CRLF, CR and LF only first,
    otherwise splitting lines is up to you.
    """
    if isinstance(lines, str):
        lines = LINE_BREAK.split(lines)
        if lines[-1] == '':  # trailing line break, or no text at all
            lines.pop()
    if reader is None:
        reader = IniReader()
    for lineno, line in enumerate(lines, 1):
        recognized = reader.classify(line)
        if not recognized:
            logging.debug(f'line {lineno} is not an INI line: {line!r}')
        yield LineResult(lineno, line, recognized)

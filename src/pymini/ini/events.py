# -*- encoding: utf-8 -*-
# @File   : events.py
# @Time   : 2024/10/13 15:42:10
# @Author : Kariko Lin

"""Typed events, for whom would rather get values than override hooks.

    ```python
    >>> events_of('[a//c]')
    [Section(path='a//c'), SubSection(name='a', path='a'),
     SectionEmpty(name='', path='a/'), SubSection(name='', path='a/'),
     SubSection(name='c', path='a//c')]
    ```
"""

from dataclasses import dataclass

from .reader import IniReader

__all__ = [
    'IniEvent', 'Empty', 'Comment', 'Section', 'SubSection', 'SectionEmpty',
    'KeyValue', 'KeyEmpty', 'ValueEmpty', 'EventRecorder', 'events_of'
]


# frozen dataclasses rather than NamedTuple,
# since `SubSection('a', 'a') == SectionEmpty('a', 'a')` as tuples.
@dataclass(frozen=True)
class IniEvent:
    pass


@dataclass(frozen=True)
class Empty(IniEvent):
    pass


@dataclass(frozen=True)
class Comment(IniEvent):
    line: str


@dataclass(frozen=True)
class Section(IniEvent):
    path: str


@dataclass(frozen=True)
class SubSection(IniEvent):
    name: str
    path: str


@dataclass(frozen=True)
class SectionEmpty(IniEvent):
    name: str
    path: str


@dataclass(frozen=True)
class KeyValue(IniEvent):
    key: str
    value: str


@dataclass(frozen=True)
class KeyEmpty(IniEvent):
    value: str


@dataclass(frozen=True)
class ValueEmpty(IniEvent):
    key: str


class EventRecorder(IniReader):
    """Collects every fired hook into `self.events`, in firing order."""

    def __init__(self) -> None:
        self.events: list[IniEvent] = []

    def on_empty(self) -> None:
        self.events.append(Empty())

    def on_comment(self, line: str) -> None:
        self.events.append(Comment(line))

    def on_section(self, path: str) -> None:
        self.events.append(Section(path))

    def on_sub_section(self, name: str, path: str) -> None:
        self.events.append(SubSection(name, path))

    def on_section_empty(self, name: str, path: str) -> None:
        self.events.append(SectionEmpty(name, path))

    def on_key_value(self, key: str, value: str) -> None:
        self.events.append(KeyValue(key, value))

    def on_key_empty(self, value: str) -> None:
        self.events.append(KeyEmpty(value))

    def on_value_empty(self, key: str) -> None:
        self.events.append(ValueEmpty(key))

    def record(self, line: str) -> list[IniEvent]:
        """Classify `line` and hand over the events it produced.

        An empty list means the line was not recognized.
        """
        self.events.clear()
        self.classify(line)
        ret, self.events = self.events, []
        return ret


def events_of(line: str) -> list[IniEvent]:
    return EventRecorder().record(line)

# -*- encoding: utf-8 -*-
# @File   : reader.py
# @Time   : 2024/10/12 21:08:35
# @Author : Kariko Lin

"""A minimal, customizable INI line reader in a single class.

`IniReader` keeps no state between lines. Feed it one line at a time
through `classify()` and override whichever `on_*` hooks you need,
for example:

    ```python
    class Printer(IniReader):
        def on_sub_section(self, name, path):
            print(name, '->', path)

    Printer().classify('[a/b/c]')  # a -> a, b -> a/b, c -> a/b/c
    ```

Trailing line breaks are NOT stripped here, so split your text on
line breaks first (or just use `pymini.ini.parser.parse`).
"""

__all__ = ['IniReader', 'InvalidArgument']

COMMENT_PREFIXES = ('#', ';')
PATH_SEP = '/'


class InvalidArgument(TypeError):
    """Raised when `IniReader.classify()` gets something other than a `str`.

    `None` is rejected instead of being treated as an empty line,
    since an empty line is a meaningful input on its own.
    """
    pass


class IniReader:
    # hooks. all of them are no-op by default.

    def on_empty(self) -> None:
        """Called when the line is exactly `''`."""

    def on_comment(self, line: str) -> None:
        """Called with the complete line, comment prefix included."""

    def on_section(self, path: str) -> None:
        """Called once per section line, before any subsection.

        `path` is the whitespace-normalized section path,
        e.g. `'a/b /c/  d'` comes as `'a/b/c/d'`.
        """

    def on_sub_section(self, name: str, path: str) -> None:
        """Called for each subsection of a section line.

        `[a/b/c]` results in three calls:
        `('a', 'a')`, `('b', 'a/b')`, `('c', 'a/b/c')`.
        """

    def on_section_empty(self, name: str, path: str) -> None:
        """Called right before `on_sub_section` if the subsection name
        is empty, with the path accumulated so far."""

    def on_key_value(self, key: str, value: str) -> None:
        """Called for a `key=value` line. Neither side is stripped."""

    def on_key_empty(self, value: str) -> None:
        """Called before `on_key_value` if the key is empty."""

    def on_value_empty(self, key: str) -> None:
        """Called before `on_key_value` if the value is empty."""

    # readers. each one returns `False` if the line doesn't fit.

    def _read_empty(self, line: str) -> bool:
        # whitespace-only lines are NOT empty.
        if line != '':
            return False
        self.on_empty()
        return True

    def _read_comment(self, line: str) -> bool:
        if not line.startswith(COMMENT_PREFIXES):
            return False
        self.on_comment(line)
        return True

    def _read_section(self, line: str) -> bool:
        if not (line.startswith('[') and line.endswith(']')):
            return False

        names = [i.strip() for i in line[1:-1].split(PATH_SEP)]
        self.on_section(PATH_SEP.join(names))

        path = ''
        for depth, name in enumerate(names):
            path = name if depth == 0 else f'{path}{PATH_SEP}{name}'
            if name == '':
                self.on_section_empty(name, path)
            self.on_sub_section(name, path)
        return True

    def _read_key_value(self, line: str) -> bool:
        if '=' not in line:
            return False

        # not `split('=', 1)`: anything after a second '=' is dropped.
        pair = line.split('=')
        key, value = pair[0], pair[1]

        if key == '':
            self.on_key_empty(value)
        if value == '':
            self.on_value_empty(key)
        self.on_key_value(key, value)
        return True

    def classify(self, line: str) -> bool:
        """Try to read one INI line, firing the matching hooks.

        Returns `False` if the line is neither empty, a comment,
        a section nor a key-value pair. Nothing is fired in that case.

        Raises:
            InvalidArgument: `line` is `None` or not a `str`.
        """
        if not isinstance(line, str):
            raise InvalidArgument(
                f'expected a str line, got {type(line).__name__}')
        return (
            self._read_empty(line)
            or self._read_comment(line)
            or self._read_section(line)
            or self._read_key_value(line)
        )

import pytest

from pymini.ini.reader import IniReader


class CallLog(IniReader):
    """Records each hook call as `(hook_name, *args)`."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def on_empty(self) -> None:
        self.calls.append(("on_empty",))

    def on_comment(self, line: str) -> None:
        self.calls.append(("on_comment", line))

    def on_section(self, path: str) -> None:
        self.calls.append(("on_section", path))

    def on_sub_section(self, name: str, path: str) -> None:
        self.calls.append(("on_sub_section", name, path))

    def on_section_empty(self, name: str, path: str) -> None:
        self.calls.append(("on_section_empty", name, path))

    def on_key_value(self, key: str, value: str) -> None:
        self.calls.append(("on_key_value", key, value))

    def on_key_empty(self, value: str) -> None:
        self.calls.append(("on_key_empty", value))

    def on_value_empty(self, key: str) -> None:
        self.calls.append(("on_value_empty", key))


@pytest.fixture
def call_log() -> CallLog:
    return CallLog()

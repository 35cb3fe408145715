import pytest

from pymini.ini.model import IniDocument, IniDocumentBuilder, IniSection

SAMPLE = """\
; top comment
name=demo

[server]
host=localhost
[server / db]
port=5432
junk line
[server/cache]
[client]
timeout=
"""


class TestIniDocumentBuilder:
    def test_pairs_before_any_section_go_to_header(self) -> None:
        doc = IniDocumentBuilder().feed(SAMPLE)

        assert dict(doc.header) == {"name": "demo"}

    def test_sections_keyed_by_canonical_path(self) -> None:
        doc = IniDocumentBuilder().feed(SAMPLE)

        assert list(doc) == ["server", "server/db", "server/cache", "client"]
        assert dict(doc["server"]) == {"host": "localhost"}
        assert dict(doc["server/db"]) == {"port": "5432"}
        assert dict(doc["server/cache"]) == {}
        assert dict(doc["client"]) == {"timeout": ""}

    def test_subsection_tree(self) -> None:
        doc = IniDocumentBuilder().feed(SAMPLE)

        assert doc.subsections() == ["server", "client"]
        assert doc.subsections("server") == ["server/db", "server/cache"]
        assert doc.subsections("client") == []

    def test_subsection_tree_with_empty_segment(self) -> None:
        doc = IniDocumentBuilder().feed(["[a//c]"])

        assert list(doc) == ["a//c"]
        assert doc.subsections() == ["a"]
        assert doc.subsections("a") == ["a/"]
        assert doc.subsections("a/") == ["a//c"]

    def test_comments_are_kept_in_order(self) -> None:
        doc = IniDocumentBuilder().feed(["#one", "k=v", ";two"])

        assert doc.comments == ["#one", ";two"]

    def test_unrecognized_lines_are_collected(self) -> None:
        builder = IniDocumentBuilder()
        builder.feed(SAMPLE)

        assert [(r.lineno, r.line) for r in builder.unrecognized] == [
            (8, "junk line")
        ]

    def test_repeated_header_reopens_section(self) -> None:
        doc = IniDocumentBuilder().feed(["[a]", "x=1", "[b]", "[a]", "y=2"])

        assert list(doc) == ["a", "b"]
        assert dict(doc["a"]) == {"x": "1", "y": "2"}

    def test_duplicate_key_warns_and_keeps_later_value(self) -> None:
        builder = IniDocumentBuilder()

        with pytest.warns(UserWarning, match="key"):
            builder.feed(["[a]", "key=1", "key=2"])

        assert builder.document["a"]["key"] == "2"

    def test_duplicate_header_key_warning_names_the_header(self) -> None:
        builder = IniDocumentBuilder()

        with pytest.warns(UserWarning) as record:
            builder.feed(["key=1", "key=2"])

        message = str(record[0].message)
        assert message.startswith("header")
        assert "\n" not in message
        assert builder.document.header["key"] == "2"

    def test_feeds_into_given_document(self) -> None:
        doc = IniDocument()
        doc["kept"] = {"a": "1"}

        IniDocumentBuilder(doc).feed(["[new]", "b=2"])

        assert list(doc) == ["kept", "new"]


class TestIniDocument:
    def test_assigning_dict_copies_it(self) -> None:
        doc = IniDocument()
        pairs = {"a": "1"}
        doc["s"] = pairs
        pairs["b"] = "2"

        assert isinstance(doc["s"], IniSection)
        assert doc["s"].name == "s"
        assert dict(doc["s"]) == {"a": "1"}

    def test_setdefault_returns_existing_section(self) -> None:
        doc = IniDocument()
        first = doc.setdefault("s")
        first["a"] = "1"

        assert doc.setdefault("s") is first

    def test_delete_and_clear(self) -> None:
        doc = IniDocumentBuilder().feed(SAMPLE)
        del doc["server"]

        assert "server" not in doc
        doc.clear()
        assert len(doc) == 0
        assert len(doc.header) == 0
        assert doc.subsections() == []
        assert doc.comments == []

    def test_section_str(self) -> None:
        section = IniSection("a/b", {"k": "v"})

        assert str(section) == "[a/b]"
        assert section.to_dict() == {"k": "v"}

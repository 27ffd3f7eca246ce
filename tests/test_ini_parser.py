"""Tests for tinyini.parsers.ini_parser: line classification and errors."""

from __future__ import annotations

import io
import textwrap

import pytest

from tinyini import Entry, ErrorKind, ParseError, parse, parse_text


BASIC = textwrap.dedent("""\
    globalkey = globalvalue

    [section]
    key = first-value
    key = second-value
    empty= ;ends with a comment
    anotherkey = "  has whitespace   " ; ends with a comment

    [sect2]
    key = "different value"
""")


class TestBasic:
    def test_concrete_scenario(self):
        document, errors = parse_text(BASIC)
        assert errors == []
        assert document == {
            "": {"globalkey": [Entry("globalvalue", 1)]},
            "section": {
                "key": [Entry("first-value", 4), Entry("second-value", 5)],
                "empty": [Entry("", 6)],
                "anotherkey": [Entry("  has whitespace   ", 7)],
            },
            "sect2": {"key": [Entry("different value", 10)]},
        }

    def test_comments_and_unicode_section(self):
        text = textwrap.dedent("""
            globalkey = globalvalue

            [section]
            key = first-value
            ; comment line
              ; another comment line

            [änöther-section] ; this is a comment and ignored
            key = "different value"
        """)
        result = parse_text(text)
        assert result.ok
        assert result.document == {
            "": {"globalkey": [Entry("globalvalue", 2)]},
            "section": {"key": [Entry("first-value", 5)]},
            "änöther-section": {"key": [Entry("different value", 10)]},
        }

    def test_result_unpacks_as_pair(self):
        result = parse_text("a = b\n")
        document, errors = result
        assert document is result.document
        assert errors is result.errors

    def test_reparse_is_identical(self):
        first = parse_text(BASIC + "oops\n")
        second = parse_text(BASIC + "oops\n")
        assert first.document == second.document
        assert first.errors == second.errors

    def test_empty_input(self):
        document, errors = parse([])
        assert document == {}
        assert errors == []


class TestSections:
    def test_global_section_only_when_used(self):
        document, _ = parse_text("[only]\nk = v\n")
        assert "" not in document
        assert document == {"only": {"k": [Entry("v", 2)]}}

    def test_keys_follow_latest_header(self):
        document, _ = parse_text("a = 1\n[foo]\nb = 2\n[bar]\nc = 3\n[foo]\nd = 4\n")
        assert document.get_values("", "a") == ["1"]
        assert sorted(document["foo"]) == ["b", "d"]
        assert document.get_values("bar", "c") == ["3"]

    def test_header_name_stops_at_first_bracket(self):
        document, errors = parse_text("[a]b] trailing\nk = v\n")
        assert errors == []
        assert document == {"a": {"k": [Entry("v", 2)]}}

    def test_names_are_case_sensitive(self):
        document, _ = parse_text("[S]\nKey = 1\nkey = 2\n[s]\nkey = 3\n")
        assert document == {
            "S": {"Key": [Entry("1", 2)], "key": [Entry("2", 3)]},
            "s": {"key": [Entry("3", 5)]},
        }

    def test_header_without_entries_is_not_materialized(self):
        document, _ = parse_text("[empty]\n[full]\nk = v\n")
        assert "empty" not in document


class TestOrder:
    @pytest.mark.parametrize("n", [0, 1, 2, 5, 12])
    def test_repeated_key_keeps_declaration_order(self, n):
        lines = ["[s]"] + [f"key = v{i}" for i in range(n)]
        document, errors = parse(lines)
        assert errors == []
        assert document.get_values("s", "key") == [f"v{i}" for i in range(n)]
        if n:
            assert [e.line for e in document["s"]["key"]] == list(range(2, n + 2))


class TestErrors:
    @pytest.mark.parametrize(
        "conf, lineno",
        [
            ("ok = value\nerror\n", 2),
            ("[section]\n[another-section]\n[borken\n", 3),
            ("[section]\nonlykey\n", 2),
            ("[section]\nkey = value\nkey ;broken\n", 3),
        ],
    )
    def test_single_error_line(self, conf, lineno):
        _, errors = parse_text(conf)
        assert errors == [ParseError("not section nor key-value", lineno)]

    def test_partial_success(self):
        document, errors = parse_text("ok = value\nerror\n")
        assert document == {"": {"ok": [Entry("value", 1)]}}
        assert [e.line for e in errors] == [2]
        assert str(errors[0]) == "2: not section nor key-value"

    def test_errors_do_not_change_section(self):
        text = "[a]\nx = 1\n[broken\ny = 2\n\n???\nz = 3\n"
        document, errors = parse_text(text)
        assert [e.line for e in errors] == [3, 6]
        assert all(e.kind == ErrorKind.SYNTAX for e in errors)
        assert document == {
            "a": {
                "x": [Entry("1", 2)],
                "y": [Entry("2", 4)],
                "z": [Entry("3", 7)],
            }
        }

    def test_missing_key_is_an_error(self):
        _, errors = parse_text("= value\n")
        assert [e.line for e in errors] == [1]


class TestQuoted:
    # "almost quoted" values are taken literally by the unquoted rule
    @pytest.mark.parametrize(
        "give, want",
        [
            ('key = "value"', "value"),
            ('key = "value" ; comment', "value"),
            (r'key = "\a\b\n"', r"\a\b\n"),
            ('key = "', '"'),
            (r'key = "hola\"', r'"hola\"'),
            (r'key = "\"value\""', '"value"'),
            (r'key = "\\\"value\\\""', r'\\"value\\"'),
            (r'key = "a\"b"', 'a"b'),
            ('key = "with ; inside"', "with ; inside"),
            ('key = ""', ""),
        ],
    )
    def test_quoted_values(self, give, want):
        document, errors = parse_text(give)
        assert errors == []
        assert document == {"": {"key": [Entry(want, 1)]}}

    def test_unterminated_quote_keeps_leading_quote(self):
        document, _ = parse_text('key = "unterminated\n')
        assert document.get_values("", "key") == ['"unterminated']


class TestUnquoted:
    @pytest.mark.parametrize(
        "give, want",
        [
            ("key = val ; trailing", "val"),
            ("key=val", "val"),
            ("   key   =   spaced out value   ", "spaced out value"),
            ("key = a;b", "a"),
            ("key =", ""),
            ("key = a = b", "a = b"),
        ],
    )
    def test_unquoted_values(self, give, want):
        document, errors = parse_text(give)
        assert errors == []
        assert document.get_values("", "key") == [want]

    def test_comment_lines_produce_nothing(self):
        document, errors = parse_text(";key = value\n   ; [section]\n")
        assert document == {}
        assert errors == []

    def test_only_ascii_whitespace_is_trimmed(self):
        document, errors = parse_text("\xa0key = v\xa0\nother =\t\x85w\x85 \n")
        assert errors == []
        assert document == {
            "": {
                "\xa0key": [Entry("v\xa0", 1)],
                "other": [Entry("\x85w\x85", 2)],
            }
        }

    def test_unicode_space_line_is_not_blank(self):
        _, errors = parse_text("\u2003\n")
        assert errors == [ParseError("not section nor key-value", 1)]

    def test_key_value_wins_over_header(self):
        document, _ = parse_text("[a=b]\n")
        assert document == {"": {"[a": [Entry("b]", 1)]}}


class TestLineSources:
    def test_file_like_lines_keep_their_newlines(self):
        stream = io.StringIO("[s]\r\nk = v\r\n\r\nq = \"x\"\n")
        document, errors = parse(stream)
        assert errors == []
        assert document == {"s": {"k": [Entry("v", 2)], "q": [Entry("x", 4)]}}

    def test_string_input_is_split_into_lines(self):
        document, _ = parse("a = 1\nb = 2")
        assert document == {"": {"a": [Entry("1", 1)], "b": [Entry("2", 2)]}}

    def test_read_failure_stops_and_keeps_partial_document(self):
        def lines():
            yield "[s]"
            yield "k = v"
            yield "broken"
            raise OSError("device went away")

        document, errors = parse(lines())
        assert document == {"s": {"k": [Entry("v", 2)]}}
        assert errors[0] == ParseError("not section nor key-value", 3)
        assert errors[-1] == ParseError("device went away", 3, ErrorKind.READ)
        assert len(errors) == 2

    def test_decode_failure_is_reported_as_read_error(self):
        raw = io.BytesIO(b"a = 1\nb = \xff\xfe\n")
        stream = io.TextIOWrapper(raw, encoding="utf-8")
        document, errors = parse(stream)
        assert errors[-1].kind == ErrorKind.READ
        assert len(errors) == 1

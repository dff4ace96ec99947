import logging

import pytest

from slashload import (
    COMPANY,
    EMPLOYEE,
    INT,
    STR,
    Company,
    Employee,
    ExhaustedInputError,
    FormatError,
    SequenceDecoder,
    load,
    open_cursor,
    tokenize,
)


def test_load_integer() -> None:
    assert load("33", INT) == 33


def test_load_string_sequence() -> None:
    assert load("3/apple/banana/cherry", SequenceDecoder(STR)) == [
        "apple",
        "banana",
        "cherry",
    ]


def test_load_company() -> None:
    assert load("CatWorld/3/tama/5/mike/6/kuro/7", COMPANY) == Company(
        "CatWorld",
        [Employee("tama", 5), Employee("mike", 6), Employee("kuro", 7)],
    )


def test_load_empty_int_sequence() -> None:
    assert load("0", SequenceDecoder(INT)) == []


def test_load_bad_integer() -> None:
    with pytest.raises(FormatError):
        load("abc", INT)


def test_trailing_tokens_are_ignored() -> None:
    assert load("taro/3/extra/tokens", EMPLOYEE) == Employee("taro", 3)


def test_missing_tokens() -> None:
    with pytest.raises(ExhaustedInputError):
        load("taro", EMPLOYEE)


def test_load_from_cursor_continues_in_place() -> None:
    cursor = open_cursor("taro/3/hanako/4")
    assert load(cursor, EMPLOYEE) == Employee("taro", 3)
    assert load(cursor, EMPLOYEE) == Employee("hanako", 4)
    assert cursor.remaining() == 0


def test_cursor_options_rejected_for_cursor_source() -> None:
    with pytest.raises(TypeError):
        load(open_cursor("1"), INT, delimiter=",")


def test_custom_delimiter() -> None:
    assert load("2,a,b", SequenceDecoder(STR), delimiter=",") == ["a", "b"]


def test_tokenize_keeps_empty_tokens() -> None:
    assert tokenize("a//b/", "/") == ["a", "", "b", ""]
    assert tokenize("", "/") == [""]


def test_tokenize_rejects_empty_delimiter() -> None:
    with pytest.raises(ValueError):
        tokenize("abc", "")


def test_environment_delimiter(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLASHLOAD_DELIMITER", "|")
    assert tokenize("a|b") == ["a", "b"]
    assert load("1|x", SequenceDecoder(STR)) == ["x"]


def test_environment_layout_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLASHLOAD_RECORD_LAYOUT", "1")
    cursor = open_cursor("taro/3")
    load(cursor, EMPLOYEE)
    assert [e.key for e in cursor.snapshot_layout()] == ["Employee.name", "Employee.age"]


def test_load_logs_decoder_kind(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="slashload.loader"):
        load("1/2", SequenceDecoder(INT))
    assert "decoding seq[int] from 2 remaining tokens" in caplog.text


class _Reversed:
    def decode(self, cursor):
        return cursor.next()[::-1]


def test_load_accepts_decode_only_capability(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="slashload.loader"):
        assert load("abc/tail", _Reversed()) == "cba"
    assert "decoding _Reversed from 2 remaining tokens" in caplog.text

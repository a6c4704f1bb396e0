"""Testes para utils.casing."""

from __future__ import annotations

import pytest

from utils.casing import CasingConvention, convert_key, split_words, transform_keys


class TestSplitWords:
    """Testes para split_words."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("thread-id", ["thread", "id"]),
            ("mutable-content", ["mutable", "content"]),
            ("HTTPServer", ["HTTP", "Server"]),
            ("fooBarBAZQux", ["foo", "Bar", "BAZ", "Qux"]),
            ("phone_number", ["phone", "number"]),
            ("a  b__c--d", ["a", "b", "c", "d"]),
            ("version2Beta", ["version2", "Beta"]),
        ],
    )
    def test_split_words(self, key: str, expected: list[str]) -> None:
        """Quebra nas fronteiras de caixa e separadores."""
        assert split_words(key) == expected

    def test_empty_key(self) -> None:
        """Chave vazia produz lista vazia."""
        assert split_words("") == []

    def test_separators_only(self) -> None:
        """Somente separadores produz lista vazia."""
        assert split_words("-_ ") == []


class TestConvertKey:
    """Testes para convert_key."""

    @pytest.mark.parametrize(
        ("convention", "expected"),
        [
            (CasingConvention.CAMEL_CASE, "threadId"),
            (CasingConvention.PASCAL_CASE, "ThreadId"),
            (CasingConvention.SNAKE_CASE, "thread_id"),
            (CasingConvention.KEBAB_CASE, "thread-id"),
            (CasingConvention.CONSTANT_CASE, "THREAD_ID"),
        ],
    )
    def test_thread_id_in_every_convention(
        self, convention: CasingConvention, expected: str
    ) -> None:
        """thread-id em cada convenção suportada."""
        assert convert_key("thread-id", convention) == expected

    def test_acronym_is_lowered_after_first_letter(self) -> None:
        """Siglas viram palavra capitalizada em Pascal/camel."""
        assert convert_key("HTTPServer", "camelCase") == "httpServer"
        assert convert_key("HTTPServer", "PascalCase") == "HttpServer"
        assert convert_key("HTTPServer", "snake_case") == "http_server"

    def test_accepts_string_convention(self) -> None:
        """Convenção pode vir como valor string do enum."""
        assert convert_key("phone_number", "PascalCase") == "PhoneNumber"

    def test_unknown_convention_raises(self) -> None:
        """Convenção desconhecida levanta ValueError."""
        with pytest.raises(ValueError):
            convert_key("x", "Train-Case")

    def test_empty_key_is_total(self) -> None:
        """String vazia produz string vazia."""
        assert convert_key("", CasingConvention.PASCAL_CASE) == ""

    @pytest.mark.parametrize("convention", list(CasingConvention))
    def test_idempotent(self, convention: CasingConvention) -> None:
        """Converter duas vezes equivale a converter uma."""
        for key in ("fooBarBAZQux", "thread-id", "MessageId", "reply_to"):
            once = convert_key(key, convention)
            assert convert_key(once, convention) == once


class TestTransformKeys:
    """Testes para transform_keys."""

    def test_recurses_into_nested_mappings(self) -> None:
        """Chaves aninhadas também são convertidas."""
        result = transform_keys(
            {"phone_number": "1", "message_attributes": {"data_type": "String"}},
            CasingConvention.PASCAL_CASE,
        )
        assert result == {"PhoneNumber": "1", "MessageAttributes": {"DataType": "String"}}

    def test_lists_are_not_traversed(self) -> None:
        """Elementos de listas ficam intactos."""
        items = [{"inner_key": 1}]
        result = transform_keys({"some_list": items}, CasingConvention.CAMEL_CASE)
        assert result == {"someList": [{"inner_key": 1}]}
        assert result["someList"] is items

    def test_binary_values_untouched(self) -> None:
        """Blobs binários passam sem alteração."""
        blob = b"\x00\x01"
        result = transform_keys({"file_content": blob}, CasingConvention.CAMEL_CASE)
        assert result["fileContent"] is blob

    def test_non_string_keys_pass_through(self) -> None:
        """Chaves não string não são convertidas."""
        assert transform_keys({1: "a"}, CasingConvention.SNAKE_CASE) == {1: "a"}

    def test_collision_last_key_wins(self) -> None:
        """Em colisão após a conversão, a última chave vence."""
        result = transform_keys({"reply_to": "a", "replyTo": "b"}, CasingConvention.CAMEL_CASE)
        assert result == {"replyTo": "b"}

    def test_source_not_mutated(self) -> None:
        """O mapping de origem não é modificado."""
        source = {"reply_to": {"display_name": "x"}}
        transform_keys(source, CasingConvention.PASCAL_CASE)
        assert source == {"reply_to": {"display_name": "x"}}

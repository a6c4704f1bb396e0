"""Testes para utils.deep_merge."""

from __future__ import annotations

from utils.deep_merge import UNSET, deep_merge, is_plain_mapping


class TestDeepMerge:
    """Testes para deep_merge."""

    def test_disjoint_keys_union(self) -> None:
        """Chaves disjuntas resultam na união."""
        assert deep_merge({}, {"a": 1}, {"b": 2}) == {"a": 1, "b": 2}

    def test_later_source_wins_for_scalars(self) -> None:
        """Fonte posterior substitui escalares."""
        assert deep_merge({}, {"a": 1}, {"a": 2}) == {"a": 2}

    def test_nested_mappings_merge_recursively(self) -> None:
        """Mappings aninhados são mesclados, preservando chaves existentes."""
        result = deep_merge(
            {},
            {"aps": {"alert": {"title": "t", "body": "b"}, "sound": "default"}},
            {"aps": {"alert": {"body": "override"}}},
        )
        assert result == {
            "aps": {"alert": {"title": "t", "body": "override"}, "sound": "default"}
        }

    def test_lists_are_replaced_not_concatenated(self) -> None:
        """Listas são substituídas inteiras."""
        assert deep_merge({}, {"to": ["a", "b"]}, {"to": ["c"]}) == {"to": ["c"]}

    def test_mapping_replaces_scalar_and_vice_versa(self) -> None:
        """Tipos diferentes: a fonte posterior vence."""
        assert deep_merge({}, {"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}
        assert deep_merge({}, {"a": {"b": 2}}, {"a": 3}) == {"a": 3}

    def test_unset_never_overwrites(self) -> None:
        """UNSET é ignorado."""
        assert deep_merge({}, {"a": 1}, {"a": UNSET}) == {"a": 1}

    def test_none_overwrites(self) -> None:
        """None é um valor explícito e sobrescreve."""
        assert deep_merge({}, {"a": 1}, {"a": None}) == {"a": None}

    def test_none_sources_skipped(self) -> None:
        """Fontes None ou vazias são ignoradas."""
        assert deep_merge({"a": 1}, None, {}) == {"a": 1}

    def test_result_does_not_share_nested_dicts(self) -> None:
        """O resultado não compartilha dicts aninhados com as fontes."""
        source = {"nested": {"x": 1}}
        result = deep_merge({}, source)
        result["nested"]["x"] = 2
        assert source == {"nested": {"x": 1}}

    def test_returns_target(self) -> None:
        """O target é mutado e retornado."""
        target: dict[str, int] = {}
        assert deep_merge(target, {"a": 1}) is target


class TestHelpers:
    """Testes para UNSET e is_plain_mapping."""

    def test_merge_into_empty_drops_unset(self) -> None:
        """Merge em dict vazio remove chaves UNSET, mantendo None."""
        assert deep_merge({}, {"a": UNSET, "b": None, "c": 1}) == {"b": None, "c": 1}

    def test_unset_is_falsy_singleton(self) -> None:
        """UNSET é falsy e tem repr estável."""
        assert not UNSET
        assert repr(UNSET) == "UNSET"

    def test_is_plain_mapping(self) -> None:
        """Dict é mapping; bytes e listas não."""
        assert is_plain_mapping({})
        assert not is_plain_mapping(b"{}")
        assert not is_plain_mapping([])

"""Tests for the prefix trie and utility registry dispatch."""

import pytest

from zephyr.errors import RegistryError
from zephyr.model import Declaration, UtilityResolution, ValueSpec
from zephyr.utilities import BUILTIN_FAMILIES, PrefixTrie, UtilityFamily, UtilityRegistry
from zephyr.utilities.base import declare


def _family(name, prefixes, priority=0, result="x", **flags):
    def resolve(req):
        if req.prefix not in prefixes:
            return None
        if result is None:
            return None
        return declare((name, f"{req.prefix}|{req.value}"))

    return UtilityFamily(name, tuple(prefixes), resolve, priority=priority, **flags)


# ---------------------------------------------------------------------------
# PrefixTrie
# ---------------------------------------------------------------------------


class TestPrefixTrie:
    def test_longest_first(self):
        trie = PrefixTrie()
        a = _family("a", ["bg"])
        b = _family("b", ["bg-gradient-to"])
        trie.insert("bg", a)
        trie.insert("bg-gradient-to", b)
        found = trie.candidates("bg-gradient-to-r")
        assert [prefix for prefix, _ in found] == ["bg-gradient-to", "bg"]

    def test_dash_boundary(self):
        trie = PrefixTrie()
        trie.insert("to", _family("to", ["to"]))
        trie.insert("top", _family("top", ["top"]))
        assert [p for p, _ in trie.candidates("top-4")] == ["top"]
        assert [p for p, _ in trie.candidates("to-red-500")] == ["to"]
        assert trie.candidates("tomato") == []

    def test_priority_order_within_prefix(self):
        trie = PrefixTrie()
        low = _family("low", ["text"], priority=0)
        high = _family("high", ["text"], priority=10)
        trie.insert("text", low)
        trie.insert("text", high)
        [(_, families)] = trie.candidates("text-lg")
        assert [f.name for f in families] == ["high", "low"]


# ---------------------------------------------------------------------------
# UtilityRegistry
# ---------------------------------------------------------------------------


class TestRegistration:
    def test_empty_prefix_rejected(self, theme):
        registry = UtilityRegistry(theme)
        with pytest.raises(RegistryError):
            registry.register(_family("bad", [""]))

    @pytest.mark.parametrize("prefix", ["-p", "p-", " p"])
    def test_malformed_prefix_rejected(self, theme, prefix):
        registry = UtilityRegistry(theme)
        with pytest.raises(RegistryError) as exc_info:
            registry.register(_family("bad", [prefix]))
        assert exc_info.value.prefix == prefix

    def test_no_prefixes_rejected(self, theme):
        with pytest.raises(RegistryError):
            UtilityRegistry(theme, [UtilityFamily("none", (), lambda req: None)])

    def test_same_prefix_same_priority_rejected(self, theme):
        registry = UtilityRegistry(theme, [_family("a", ["p"])])
        with pytest.raises(RegistryError, match="claimed by both"):
            registry.register(_family("b", ["p"]))

    def test_same_prefix_different_priority_allowed(self, theme):
        registry = UtilityRegistry(theme, [_family("a", ["p"]), _family("b", ["p"], priority=1)])
        assert [f.name for f in registry.families()] == ["a", "b"]

    def test_duplicate_family_name_rejected(self, theme):
        registry = UtilityRegistry(theme, [_family("a", ["p"])])
        with pytest.raises(RegistryError):
            registry.register(_family("a", ["m"]))

    def test_rejected_family_leaves_registry_unchanged(self, theme):
        registry = UtilityRegistry(theme, [_family("a", ["p"])])
        with pytest.raises(RegistryError):
            registry.register(_family("b", ["m", "p"]))
        assert registry.get("b") is None
        assert registry.prefixes() == ["p"]

    def test_builtin_families_do_not_clash(self, theme):
        registry = UtilityRegistry(theme, BUILTIN_FAMILIES)
        assert len(registry.families()) == len(BUILTIN_FAMILIES)


class TestDispatch:
    def test_longest_prefix_wins(self, theme):
        registry = UtilityRegistry(theme, [_family("short", ["grid"]), _family("long", ["grid-cols"])])
        result = registry.resolve_value("grid-cols", ValueSpec.scale("3"))
        assert result.properties == (Declaration("long", "grid-cols|3"),)

    def test_higher_priority_wins(self, theme):
        registry = UtilityRegistry(
            theme, [_family("low", ["text"]), _family("high", ["text"], priority=10)]
        )
        result = registry.resolve_value("text", ValueSpec.scale("lg"))
        assert result.properties[0].name == "high"

    def test_falls_through_on_none(self, theme):
        registry = UtilityRegistry(
            theme,
            [_family("low", ["text"]), _family("high", ["text"], priority=10, result=None)],
        )
        result = registry.resolve_value("text", ValueSpec.scale("red-500"))
        assert result.properties[0].name == "low"

    def test_falls_through_to_shorter_prefix(self, theme):
        registry = UtilityRegistry(
            theme, [_family("short", ["bg"]), _family("long", ["bg-radial"], result=None)]
        )
        result = registry.resolve_value("bg", ValueSpec.scale("radial"))
        assert result.properties == (Declaration("short", "bg|radial"),)

    def test_no_match_returns_none(self, theme):
        registry = UtilityRegistry(theme, [_family("a", ["p"])])
        assert registry.resolve_value("q", ValueSpec.scale("4")) is None

    def test_negative_skips_families_without_support(self, theme):
        registry = UtilityRegistry(theme, [_family("a", ["m"])])
        assert registry.resolve_value("m", ValueSpec.scale("4"), negative=True) is None
        registry = UtilityRegistry(theme, [_family("a", ["m"], negative=True)])
        assert registry.resolve_value("m", ValueSpec.scale("4"), negative=True) is not None

    def test_opacity_skips_families_without_support(self, theme):
        registry = UtilityRegistry(theme, [_family("a", ["bg"])])
        assert registry.resolve_value("bg", ValueSpec.scale("red-500"), opacity=50) is None

    def test_bad_return_type_raises(self, theme):
        family = UtilityFamily("broken", ("p",), lambda req: [])
        registry = UtilityRegistry(theme, [family])
        with pytest.raises(TypeError, match="broken"):
            registry.resolve_value("p", ValueSpec.scale("4"))


class TestEmptyResolution:
    def test_resolution_must_carry_something(self):
        with pytest.raises(ValueError):
            UtilityResolution()

"""Tests for selector construction, media wrapping and ordering keys."""

import pytest

from zephyr.config import ZephyrConfig
from zephyr.emit import RuleEmitter, escape_class
from zephyr.model import Declaration
from zephyr.parser import parse_class

PROPS = (Declaration("padding", "1rem"),)


@pytest.fixture
def emit(emitter, variants):
    def _emit(raw, index=0, using=None):
        token = parse_class(raw, variants).token
        return (using or emitter).emit(token, PROPS, index)

    return _emit


class TestEscapeClass:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("p-4", "p-4"),
            ("w-1/2", "w-1\\/2"),
            ("md:p-4", "md\\:p-4"),
            ("w-[10px]", "w-\\[10px\\]"),
            ("p-0.5", "p-0\\.5"),
            ("!p-4", "\\!p-4"),
            ("2xl:p-4", "\\32 xl\\:p-4"),
            ("w-[calc(50%+4px)]", "w-\\[calc\\(50\\%\\+4px\\)\\]"),
        ],
    )
    def test_escape(self, name, expected):
        assert escape_class(name) == expected


class TestSelectors:
    def test_plain(self, emit):
        rule = emit("p-4")
        assert rule.selector == ".p-4"
        assert rule.media is None
        assert rule.sources == ("p-4",)

    def test_state_appends_pseudo_class(self, emit):
        assert emit("hover:p-4").selector == ".hover\\:p-4:hover"
        assert emit("first:p-4").selector == ".first\\:p-4:first-child"

    def test_dark_class_mode(self, emit):
        assert emit("dark:p-4").selector == ".dark .dark\\:p-4"
        assert emit("light:p-4").selector == ".light .light\\:p-4"

    def test_dark_media_mode(self, emit, theme):
        emitter = RuleEmitter(theme, ZephyrConfig(dark_mode="media"))
        rule = emit("dark:p-4", using=emitter)
        assert rule.selector == ".dark\\:p-4"
        assert rule.media == "(prefers-color-scheme: dark)"

    def test_custom_dark_selector(self, emit, theme):
        emitter = RuleEmitter(theme, ZephyrConfig(dark_selector="[data-theme=dark]"))
        assert emit("dark:p-4", using=emitter).selector == "[data-theme=dark] .dark\\:p-4"

    def test_group_and_peer(self, emit):
        assert emit("group-hover:p-4").selector == ".group:hover .group-hover\\:p-4"
        assert emit("peer-checked:p-4").selector == ".peer:checked ~ .peer-checked\\:p-4"

    def test_pseudo_element_after_state(self, emit):
        assert emit("before:hover:p-4").selector == ".hover\\:before\\:p-4:hover::before"

    def test_combined(self, emit):
        rule = emit("hover:md:dark:p-4")
        assert rule.selector == ".dark .md\\:dark\\:hover\\:p-4:hover"
        assert rule.media == "(min-width: 768px)"


class TestCanonicalization:
    def test_variant_order_does_not_matter(self, emit):
        a = emit("dark:hover:p-4")
        b = emit("hover:dark:p-4")
        assert a == b

    def test_responsive_order_does_not_matter(self, emit):
        assert emit("md:hover:p-4") == emit("hover:md:p-4")


class TestMedia:
    def test_responsive(self, emit):
        assert emit("md:p-4").media == "(min-width: 768px)"

    def test_device_variant(self, emit):
        assert emit("print:p-4").media == "print"
        assert emit("motion-reduce:p-4").media == "(prefers-reduced-motion: reduce)"

    def test_media_type_comes_first(self, emit):
        assert emit("md:print:p-4").media == "print and (min-width: 768px)"

    def test_multiple_breakpoints(self, emit):
        assert emit("sm:lg:p-4").media == "(min-width: 640px) and (min-width: 1024px)"


class TestOrderKey:
    def test_index_is_carried(self, emit):
        assert emit("p-4", index=7).order_key == (0, 0, 7)

    def test_mobile_first(self, emit):
        sm = emit("sm:p-4", index=9)
        lg = emit("lg:p-4", index=0)
        assert sm.sort_key() < lg.sort_key()

    def test_base_before_state_before_responsive(self, emit):
        base = emit("p-4", index=5)
        hover = emit("hover:p-4", index=0)
        md = emit("md:p-4", index=0)
        assert base.sort_key() < hover.sort_key() < md.sort_key()

    def test_largest_breakpoint_ranks(self, emit):
        assert emit("sm:xl:p-4").order_key[0] == 4


class TestCompound:
    def test_sorted_compound_selector(self, emitter, variants):
        tokens = [parse_class(raw, variants).token for raw in ("to-red-500", "from-blue-500")]
        rule = emitter.emit_compound(tokens, PROPS, 3)
        assert rule.selector == ".from-blue-500.to-red-500"
        assert rule.sources == ("from-blue-500", "to-red-500")
        assert rule.order_key == (0, 0, 3)

    def test_compound_with_state(self, emitter, variants):
        tokens = [parse_class(raw, variants).token for raw in ("hover:from-blue-500", "hover:to-red-500")]
        rule = emitter.emit_compound(tokens, PROPS, 0)
        assert rule.selector == ".hover\\:from-blue-500.hover\\:to-red-500:hover"

    def test_empty_rejected(self, emitter):
        with pytest.raises(ValueError):
            emitter.emit_compound([], PROPS, 0)

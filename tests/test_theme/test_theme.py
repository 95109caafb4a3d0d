"""Tests for the theme model, loader and engine config."""

import json

import pytest

from zephyr import ConfigurationError, Theme, ThemeError, ZephyrConfig, load_theme, theme_from_dict
from zephyr.theme import default_theme


class TestTheme:
    def test_default_theme_is_shared(self):
        assert default_theme() is default_theme()

    def test_tables_are_read_only(self, theme):
        with pytest.raises(TypeError):
            theme.spacing["4"] = "2rem"

    def test_nested_tables_are_read_only(self, theme):
        with pytest.raises(TypeError):
            theme.colors["blue"]["500"] = "#000000"

    @pytest.mark.parametrize(
        "kwargs, key",
        [
            ({"breakpoints": {"sm": 0}}, "breakpoints.sm"),
            ({"breakpoints": {"sm": "640px"}}, "breakpoints.sm"),
            ({"spacing": {"": "1px"}}, "spacing"),
            ({"colors": {"brand": {"500": "orange"}}}, "colors.brand.500"),
            ({"colors": {"brand": {}}}, "colors.brand"),
            ({"variants": {"hocus": ":hover"}}, "variants.hocus"),
            ({"variants": {"hover": "&:hover"}}, "variants.hover"),
            ({"variants": {"Bad_Name": "&:hover"}}, "variants.Bad_Name"),
            ({"states": {"hover": "hover"}}, "states.hover"),
            ({"font_size": {"xs": "0.75rem"}}, "font_size.xs"),
            ({"keyframes": {"spin": "rotate(360deg)"}}, "keyframes.spin"),
            ({"keyframes": {"spin": {}}}, "keyframes.spin"),
        ],
    )
    def test_malformed_tables(self, kwargs, key):
        with pytest.raises(ThemeError) as exc_info:
            Theme(**kwargs)
        assert exc_info.value.key == key

    def test_theme_error_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            Theme(breakpoints={"sm": -1})


class TestThemeFromDict:
    def test_extend_merges(self):
        theme = theme_from_dict({"extend": {"colors": {"brand": {"500": "#ff5500"}}}})
        assert theme.colors["brand"]["500"] == "#ff5500"
        assert theme.colors["blue"]["500"] == "#3b82f6"

    def test_extend_merges_shades(self):
        theme = theme_from_dict({"extend": {"colors": {"blue": {"950": "#000000"}}}})
        assert theme.colors["blue"]["950"] == "#000000"
        assert theme.colors["blue"]["500"] == "#3b82f6"
        assert theme.colors["red"]["500"] == "#ef4444"

    def test_top_level_family_replaces_shades(self):
        theme = theme_from_dict({"colors": {"blue": {"950": "#000000"}}})
        assert dict(theme.colors) == {"blue": {"950": "#000000"}}

    def test_extend_keyframes_and_animation(self):
        theme = theme_from_dict(
            {
                "extend": {
                    "animation": {"fade": "fade 1s ease-out"},
                    "keyframes": {"fade": {"from": "opacity: 0"}},
                }
            }
        )
        assert theme.animation["spin"] == "spin 1s linear infinite"
        assert theme.keyframes["fade"]["from"] == "opacity: 0"

    def test_top_level_replaces(self):
        theme = theme_from_dict({"breakpoints": {"tablet": 700}})
        assert dict(theme.breakpoints) == {"tablet": 700}

    def test_extend_tuple_table(self):
        theme = theme_from_dict({"extend": {"rotate": ["7", "0"]}})
        assert theme.rotate[-1] == "7"
        assert theme.rotate.count("0") == 1

    def test_unknown_table(self):
        with pytest.raises(ThemeError) as exc_info:
            theme_from_dict({"colours": {}})
        assert exc_info.value.key == "colours"

    def test_extend_must_be_object(self):
        with pytest.raises(ThemeError):
            theme_from_dict({"extend": ["colors"]})

    def test_extend_value_shape(self):
        with pytest.raises(ThemeError):
            theme_from_dict({"extend": {"spacing": ["1px"]}})

    def test_document_must_be_object(self):
        with pytest.raises(ThemeError):
            theme_from_dict(["spacing"])

    def test_base_theme(self):
        base = theme_from_dict({"breakpoints": {"tablet": 700}})
        theme = theme_from_dict({"extend": {"breakpoints": {"desktop": 1200}}}, base=base)
        assert dict(theme.breakpoints) == {"tablet": 700, "desktop": 1200}


class TestLoadTheme:
    def test_load(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"extend": {"spacing": {"13": "3.25rem"}}}))
        theme = load_theme(path)
        assert theme.spacing["13"] == "3.25rem"
        assert theme.spacing["4"] == "1rem"

    def test_font_size_pairs_from_json(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"extend": {"font_size": {"huge": ["5rem", "1"]}}}))
        assert load_theme(path).font_size["huge"] == ("5rem", "1")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text("{not json")
        with pytest.raises(ThemeError, match="invalid JSON"):
            load_theme(str(path))

    def test_invalid_content(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"breakpoints": {"sm": 0}}))
        with pytest.raises(ThemeError):
            load_theme(path)


class TestConfig:
    def test_defaults(self):
        config = ZephyrConfig()
        assert config.dark_mode == "class"
        assert config.dark_selector == ".dark"
        assert not config.important
        assert config.cache_size == 1024

    @pytest.mark.parametrize(
        "kwargs",
        [{"dark_mode": "auto"}, {"cache_size": -1}, {"cache_shards": 0}],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            ZephyrConfig(**kwargs)

    def test_custom_dark_selector(self):
        from zephyr import Engine

        engine = Engine(config=ZephyrConfig(dark_selector="[data-theme=dark]"))
        [rule] = engine.generate(["dark:p-4"]).rules
        assert rule.selector == "[data-theme=dark] .dark\\:p-4"

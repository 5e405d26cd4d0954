"""Configuration tests."""

from textwrap import dedent

import pytest

from tsdoc_highlighter.config import (
    ConfigError,
    HighlightConfig,
    find_config_file,
    load_config,
)


def test_defaults():
    config = HighlightConfig()

    assert config.flavor == "mocha"
    assert config.enable_bold_tags is True
    assert config.enable_italic_descriptions is True
    assert config.opacity == 1.0


def test_flavor_is_case_insensitive():
    assert HighlightConfig(flavor="Latte").flavor == "latte"


@pytest.mark.parametrize("kwargs", [
    {"flavor": "espresso"},
    {"opacity": 1.5},
    {"opacity": -0.1},
    {"opacity": "high"},
    {"enable_bold_tags": "yes"},
])
def test_invalid_values(kwargs):
    with pytest.raises(ConfigError):
        HighlightConfig(**kwargs)


def test_from_mapping_accepts_camel_and_snake_case():
    config = HighlightConfig.from_mapping({
        "flavor": "frappe",
        "enableBoldTags": False,
        "enable-italic-descriptions": False,
        "opacity": 0.5,
    })

    assert config == HighlightConfig(
        flavor="frappe",
        enable_bold_tags=False,
        enable_italic_descriptions=False,
        opacity=0.5,
    )


def test_unknown_keys_are_ignored(caplog):
    config = HighlightConfig.from_mapping({"colour": "red"})

    assert config == HighlightConfig()
    assert "colour" in caplog.text


def test_merged_skips_none():
    config = HighlightConfig(flavor="latte")

    assert config.merged(flavor=None, opacity=None) == config
    assert config.merged(opacity=0.25).opacity == 0.25


def test_load_dedicated_file(tmp_path):
    (tmp_path / ".tsdoc-highlighter.toml").write_text('flavor = "macchiato"\nopacity = 0.8\n')

    config = load_config(start=tmp_path)

    assert config.flavor == "macchiato"
    assert config.opacity == 0.8


def test_load_pyproject_table(tmp_path):
    (tmp_path / "pyproject.toml").write_text(dedent("""\
        [project]
        name = "demo"

        [tool.tsdoc-highlighter]
        enableItalicDescriptions = false
    """))

    config = load_config(start=tmp_path / "src")

    assert config.enable_italic_descriptions is False


def test_pyproject_without_table_is_skipped(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n')

    assert find_config_file(tmp_path) is None
    assert load_config(start=tmp_path) == HighlightConfig()


def test_explicit_path(tmp_path):
    path = tmp_path / "custom.toml"
    path.write_text('enableBoldTags = false\n')

    assert load_config(path).enable_bold_tags is False


def test_invalid_toml(tmp_path):
    path = tmp_path / "broken.toml"
    path.write_text("flavor = \n")

    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_explicit_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.toml")


def test_malformed_pyproject_does_not_stop_search(tmp_path, caplog):
    (tmp_path / ".tsdoc-highlighter.toml").write_text('flavor = "latte"\n')
    nested = tmp_path / "pkg"
    nested.mkdir()
    (nested / "pyproject.toml").write_text("[tool\n")

    assert find_config_file(nested) == tmp_path / ".tsdoc-highlighter.toml"
    assert load_config(start=nested).flavor == "latte"
    assert "pyproject.toml" in caplog.text

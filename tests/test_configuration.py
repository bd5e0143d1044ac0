"""
Tests for the Configuration facade.
"""

from pathlib import Path

import pytest

from tagconf import Configuration
from tagconf.config.errors import ConfigError, ConversionError, ParseError, PathNotFoundError
from tagconf.models import Leaf, Section


def test_end_to_end_sample(sample_config: Configuration) -> None:
    assert sample_config.get("ahoi", "bhoi.choi", "bla", as_type=bool) is True
    assert sample_config.get_all("ahoi", "bhoi.choi", "bla", as_type=bool) == [
        True,
        False,
        True,
        True,
    ]
    assert sample_config.get_sections("ahoi", "bhoi") == ["choi", "choi"]


def test_get_returns_first_match(sample_config: Configuration) -> None:
    assert sample_config.get("ahoi.bhoi.choi.bla") == "yes"
    assert sample_config.get_all("ahoi.bhoi.choi.bla") == ["yes", "no", "1", "ok"]


def test_get_missing_path(sample_config: Configuration) -> None:
    with pytest.raises(PathNotFoundError) as exc_info:
        sample_config.get("bla", "blubb", "x", "y.z.h.j")

    error = exc_info.value
    assert error.path == ["bla", "blubb", "x", "y", "z", "h", "j"]
    assert error.filename == "sample.conf"
    assert "bla.blubb.x.y.z.h.j" in str(error)


def test_get_ignores_section_matches(sample_config: Configuration) -> None:
    """A path ending on sections has no value to return."""
    with pytest.raises(PathNotFoundError):
        sample_config.get("ahoi.bhoi")

    with pytest.raises(PathNotFoundError, match="Empty path"):
        sample_config.get()


def test_get_conversion_error() -> None:
    config = Configuration("app.conf", "port = eighty\n")

    with pytest.raises(ConversionError):
        config.get("port", as_type=int)


def test_try_get_defaults() -> None:
    config = Configuration("app.conf", "[server]\nport = 80\n[!server]\n")

    assert config.try_get(8080, "server.missing") == 8080
    assert config.try_get(8080, "server.port") == 80
    assert config.try_get(None, "server.port") == "80"
    assert config.try_get(False, "server.port") is True
    assert config.try_get("x", "server.port", as_type=float) == 80.0


def test_try_get_still_raises_conversion_errors() -> None:
    config = Configuration("app.conf", "port = eighty\n")

    with pytest.raises(ConversionError):
        config.try_get(80, "port")

    with pytest.raises(ConversionError):
        config.try_get_all(80, "port")


def test_try_get_all(sample_config: Configuration) -> None:
    assert sample_config.try_get_all(True, "ahoi.bhoi.choi.bla") == [True, False, True, True]
    assert sample_config.try_get_all(7, "ahoi.nothing") == [7]


def test_get_all_missing(sample_config: Configuration) -> None:
    with pytest.raises(PathNotFoundError):
        sample_config.get_all("ahoi.nothing")


def test_get_names_and_default() -> None:
    config = Configuration("app.conf", "[server]\nhost = a\nport = 1\n[tls]\n[!tls]\n[!server]\n")

    assert config.get_names("server") == ["host", "port"]
    assert config.get_sections("server") == ["tls"]
    assert config.get_sections() == ["server"]

    with pytest.raises(PathNotFoundError):
        config.get_names("missing.path")

    assert config.try_get_names("default", "missing.path") == ["default"]
    assert config.try_get_sections("default", "missing.path") == ["default"]
    assert config.try_get_names("default", "server") == ["host", "port"]


def test_get_names_below_fanned_out_sections(sample_config: Configuration) -> None:
    assert sample_config.get_names("ahoi", "bhoi", "choi") == ["bla"]
    assert sample_config.get_sections("ahoi", "bhoi", "choi") == []


def test_get_sections_of_empty_section() -> None:
    """A section without children has nothing to list."""
    config = Configuration("app.conf", "[empty]\n[!empty]\n")

    with pytest.raises(PathNotFoundError):
        config.get_sections("empty")
    assert config.try_get_sections("none", "empty") == ["none"]


def test_set_updates_every_match() -> None:
    config = Configuration("app.conf", "[s]\nk = 1\n[!s]\n[s]\nk = 2\n[!s]\n[s]\nk = 3\n[!s]\n")
    before = len(list(config.root.walk()))

    updated = config.set(9, "s.k")

    assert updated == 3
    assert config.get_all("s.k", as_type=int) == [9, 9, 9]
    assert len(list(config.root.walk())) == before


def test_set_missing_path_is_noop() -> None:
    config = Configuration("app.conf", "[s]\nk = 1\n[!s]\n")
    before = config.serialize()

    assert config.set("x", "s.missing") == 0
    assert config.set("x", "s") == 0
    assert config.serialize() == before


def test_set_bool_round_trips() -> None:
    config = Configuration("app.conf", "enabled = yes\n")

    config.set(False, "enabled")

    assert config.get("enabled") == "false"
    assert config.get("enabled", as_type=bool) is False


def test_has_and_nodes(sample_config: Configuration) -> None:
    assert sample_config.has("ahoi.bhoi")
    assert not sample_config.has("ahoi.zhoi")
    assert len(sample_config.nodes("ahoi.bhoi")) == 2


def test_line_of() -> None:
    config = Configuration("app.conf", "[server]\n\n  port = 80\n[!server]\n")

    assert config.line_of("server") == 1
    assert config.line_of("server.port") == 3

    with pytest.raises(PathNotFoundError):
        config.line_of("server.host")


def test_subconfig_shares_nodes(sample_config: Configuration) -> None:
    view = sample_config.subconfig("ahoi.bhoi")

    assert view.filename == "sample.conf-ahoi.bhoi"
    assert view.get_all("choi.bla") == ["yes", "no"]

    view.set("changed", "choi.bla")

    assert sample_config.get_all("ahoi.bhoi.choi.bla") == ["changed", "changed", "1", "ok"]


def test_subconfig_missing(sample_config: Configuration) -> None:
    with pytest.raises(PathNotFoundError):
        sample_config.subconfig("ahoi.bhoi.choi.bla")


def test_load_from_file(config_file: Path) -> None:
    config = Configuration(config_file)

    assert config.filename == str(config_file)
    assert config.get_all("ahoi.bhoi.choi.bla") == ["yes", "no", "1", "ok"]


def test_load_replaces_content(tmp_path: Path, config_file: Path) -> None:
    other = tmp_path / "other.conf"
    other.write_text("key = value\n")
    config = Configuration(config_file)

    config.load(other)

    assert config.filename == str(other)
    assert not config.has("ahoi")
    assert config.get("key") == "value"


def test_failed_load_keeps_previous_tree(tmp_path: Path, config_file: Path) -> None:
    broken = tmp_path / "broken.conf"
    broken.write_text("[open]\n")
    config = Configuration(config_file)

    with pytest.raises(ParseError):
        config.load(broken)

    assert config.filename == str(config_file)
    assert config.has("ahoi")


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Failed to read"):
        Configuration(tmp_path / "missing.conf")


def test_store_round_trip(tmp_path: Path, config_file: Path) -> None:
    config = Configuration(config_file)
    config.set(0, "ahoi.bhoi.choi.bla")
    target = tmp_path / "out.conf"

    config.store(target)
    config.store()

    for path in (target, config_file):
        reloaded = Configuration(path)
        assert reloaded.get_all("ahoi.bhoi.choi.bla", as_type=bool) == [False] * 4


def test_store_without_filename() -> None:
    config = Configuration()

    with pytest.raises(ConfigError):
        config.store()


def test_in_memory_content_without_filename() -> None:
    config = Configuration(content="[a]\nk = v\n[!a]\n")

    assert config.filename == ""
    assert config.get("a.k") == "v"

    with pytest.raises(PathNotFoundError, match="<string>"):
        config.get("a.missing")


def test_empty_configuration() -> None:
    config = Configuration()

    assert isinstance(config.root, Section)
    assert config.root.children == []
    assert config.serialize() == ""
    assert config.try_get("fallback", "anything") == "fallback"


def test_load_string_parse_error_context() -> None:
    config = Configuration()

    with pytest.raises(ParseError) as exc_info:
        config.load_string("[a]\n[!b]\n", "inline.conf")

    assert exc_info.value.filename == "inline.conf"
    assert exc_info.value.line == 2


def test_root_children_are_leaves_and_sections() -> None:
    config = Configuration("app.conf", "top = 1\n[s]\n[!s]\n")

    top, section = config.root.children
    assert isinstance(top, Leaf)
    assert isinstance(section, Section)


def test_set_value_with_edge_whitespace_survives_store(tmp_path: Path) -> None:
    config = Configuration(content="k = 1\n")
    target = tmp_path / "out.conf"

    config.set("  padded  ", "k")
    config.store(target)

    assert Configuration(target).get("k") == "  padded  "
    assert Configuration(content=config.serialize()).get("k") == "  padded  "

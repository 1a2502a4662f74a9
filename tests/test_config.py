"""Tests for pathmapper.config — MapperConfig frozen dataclass."""

import pytest

from pathmapper.compiler.captures import CAPTURES
from pathmapper.config import DEFAULT_CONFIG, MapperConfig
from pathmapper.errors import ConfigurationError


class TestMapperConfig:
    def test_defaults(self) -> None:
        cfg = MapperConfig()

        assert cfg.single_capture == r"([\w.\-]+)"
        assert cfg.multi_capture == r"([\w/.\-]+)"
        assert cfg.optional_slashes is True

    def test_defaults_come_from_captures(self) -> None:
        assert DEFAULT_CONFIG.single_capture == CAPTURES["single"]
        assert DEFAULT_CONFIG.multi_capture == CAPTURES["multi"]

    def test_override(self) -> None:
        cfg = MapperConfig(single_capture=r"(\d+)", optional_slashes=False)

        assert cfg.single_capture == r"(\d+)"
        assert cfg.optional_slashes is False

    def test_frozen(self) -> None:
        cfg = MapperConfig()

        with pytest.raises(AttributeError):
            cfg.optional_slashes = False  # type: ignore[misc]

    def test_invalid_regex(self) -> None:
        with pytest.raises(ConfigurationError, match="single_capture"):
            MapperConfig(single_capture="([a-z]+")

    def test_capture_without_group(self) -> None:
        with pytest.raises(ConfigurationError, match="exactly one group"):
            MapperConfig(multi_capture=r"[\w/]+")

    def test_capture_with_two_groups(self) -> None:
        with pytest.raises(ConfigurationError, match="found 2"):
            MapperConfig(single_capture=r"(\w+)(\d)")

    def test_named_group(self) -> None:
        with pytest.raises(ConfigurationError, match="named groups"):
            MapperConfig(single_capture=r"(?P<v>\w+)")

    @pytest.mark.parametrize("fragment", [r"(\w+)\1", r"(\w)(?:-\1)*", r"(?:(?P=v))?(\w+)"])
    def test_backreference(self, fragment: str) -> None:
        with pytest.raises(ConfigurationError):
            MapperConfig(multi_capture=fragment)

    def test_escaped_backslash_before_digit_allowed(self) -> None:
        cfg = MapperConfig(single_capture=r"(\w+\\1)")
        assert cfg.single_capture == r"(\w+\\1)"

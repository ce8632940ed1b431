"""Tests for the scorer configuration loader.

Python justification: Required for pytest testing framework.
"""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from llmscore.config.loader import ConfigLoader, _deep_merge, configure_logging
from llmscore.config.models import ConfigurationError, LoggingConfig, ScorerSuiteConfig


def write_yaml(path: Path, content: str) -> Path:
    """Write YAML content, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


class TestDeepMerge:
    """Tests for _deep_merge."""

    def test_override_wins(self) -> None:
        assert _deep_merge({"a": 1}, {"a": 2}) == {"a": 2}

    def test_nested_merge(self) -> None:
        base = {"tonality": {"clarity_weight": 1.0, "threshold": 0.2}}
        override = {"tonality": {"threshold": 0.5}}
        assert _deep_merge(base, override) == {
            "tonality": {"clarity_weight": 1.0, "threshold": 0.5}
        }

    def test_lists_replaced(self) -> None:
        base = {"moderation": {"categories": ["Toxic"]}}
        override = {"moderation": {"categories": ["Insult", "Violent"]}}
        assert _deep_merge(base, override)["moderation"]["categories"] == ["Insult", "Violent"]

    def test_none_inherits(self) -> None:
        assert _deep_merge({"exact_match": {"trim_whitespace": True}}, {"exact_match": None}) == {
            "exact_match": {"trim_whitespace": True}
        }

    def test_base_not_mutated(self) -> None:
        base = {"a": {"b": 1}}
        _deep_merge(base, {"a": {"b": 2}})
        assert base == {"a": {"b": 1}}


class TestConfigLoaderLoad:
    """Tests for ConfigLoader.load."""

    def test_no_files_gives_empty_suite(self, tmp_path: Path) -> None:
        config = ConfigLoader(base_path=tmp_path).load()
        assert isinstance(config, ScorerSuiteConfig)
        assert config.enabled_scorers() == []
        assert config.logging.level == "INFO"

    def test_defaults_only(self, tmp_path: Path) -> None:
        write_yaml(
            tmp_path / "config" / "defaults.yaml",
            "logging:\n  level: DEBUG\nexact_match:\n  trim_whitespace: true\n",
        )
        config = ConfigLoader(base_path=tmp_path).load()
        assert config.logging.level == "DEBUG"
        assert config.exact_match is not None
        assert config.exact_match.trim_whitespace is True

    def test_override_merged_over_defaults(self, tmp_path: Path) -> None:
        write_yaml(
            tmp_path / "config" / "defaults.yaml",
            "tonality:\n  clarity_weight: 2.0\n  threshold: 0.2\n",
        )
        write_yaml(tmp_path / "eval.yaml", "tonality:\n  threshold: 0.5\nmoderation: {}\n")

        config = ConfigLoader(base_path=tmp_path).load("eval.yaml")

        assert config.tonality is not None
        assert config.tonality.clarity_weight == 2.0
        assert config.tonality.threshold == 0.5
        assert config.enabled_scorers() == ["tonality", "moderation"]

    def test_absolute_override_path(self, tmp_path: Path) -> None:
        override = write_yaml(tmp_path / "elsewhere" / "suite.yaml", "factuality: {}\n")
        config = ConfigLoader(base_path=tmp_path / "missing").load(override)
        assert config.enabled_scorers() == ["factuality"]

    def test_empty_override_file(self, tmp_path: Path) -> None:
        write_yaml(tmp_path / "empty.yaml", "")
        config = ConfigLoader(base_path=tmp_path).load("empty.yaml")
        assert config.enabled_scorers() == []


class TestConfigLoaderErrors:
    """Tests for configuration error handling."""

    def test_missing_override(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigLoader(base_path=tmp_path).load("nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        write_yaml(tmp_path / "bad.yaml", "tonality: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ConfigLoader(base_path=tmp_path).load("bad.yaml")

    def test_non_mapping(self, tmp_path: Path) -> None:
        write_yaml(tmp_path / "list.yaml", "- exact_match\n- tonality\n")
        with pytest.raises(ConfigurationError, match="must be a YAML mapping"):
            ConfigLoader(base_path=tmp_path).load("list.yaml")

    def test_validation_error_wrapped(self, tmp_path: Path) -> None:
        write_yaml(tmp_path / "suite.yaml", "tonality:\n  threshold: 3\n")
        with pytest.raises(ConfigurationError, match="Invalid scorer configuration"):
            ConfigLoader(base_path=tmp_path).load("suite.yaml")

    def test_unknown_category(self) -> None:
        loader = ConfigLoader()
        with pytest.raises(ConfigurationError):
            loader.load_from_dict({"moderation": {"categories": ["Spam"]}})


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_applies_level_and_format(self) -> None:
        with patch("llmscore.config.loader.logging.basicConfig") as basic_config:
            configure_logging(LoggingConfig(level="warning", format="%(message)s"))
        basic_config.assert_called_once_with(level=logging.WARNING, format="%(message)s")


class TestConfigLoaderReadErrors:
    """Unreadable paths are reported as ConfigurationError."""

    def test_directory_as_override(self, tmp_path: Path) -> None:
        (tmp_path / "suite.yaml").mkdir()
        with pytest.raises(ConfigurationError, match="Cannot read"):
            ConfigLoader(base_path=tmp_path).load("suite.yaml")

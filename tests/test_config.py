import pytest

from placeholdercheck import config
from placeholdercheck.exceptions import ConfigError


def test_missing_default_config_returns_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert config.load_config() == {}


def test_missing_explicit_config_is_an_error(tmp_path):
    with pytest.raises(ConfigError):
        config.load_config(str(tmp_path / "nope.yml"))


def test_load_config(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(
        "logging:\n  level: debug\ncheck:\n  source: en.json\n  ignore: a.json,b.json\n"
        "  keyword_prefixes: [arg, '%']\n  jobs: 2\n",
        encoding="utf-8",
    )

    settings = config.load_config(str(path))

    assert config.check_defaults(settings) == {
        "source": "en.json",
        "ignore": ["a.json", "b.json"],
        "keyword_prefixes": ["arg", "%"],
        "jobs": 2,
    }


def test_invalid_yaml_is_an_error(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("logging: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        config.load_config(str(path))


def test_non_mapping_config_is_an_error(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        config.load_config(str(path))


def test_check_defaults_without_section():
    assert config.check_defaults({}) == {
        "source": None,
        "ignore": [],
        "keyword_prefixes": [],
        "jobs": 1,
    }


@pytest.mark.parametrize("jobs", [0, -1, "two", True])
def test_check_defaults_rejects_bad_jobs(jobs):
    with pytest.raises(ConfigError):
        config.check_defaults({"check": {"jobs": jobs}})


def test_unknown_logging_level():
    with pytest.raises(ConfigError):
        config.setup_logging({"logging": {"level": "LOUD"}})


def test_split_values():
    assert config.split_values(("a.json,b.json", "c.json", ",")) == [
        "a.json",
        "b.json",
        "c.json",
    ]
    assert config.split_values(None) == []


def test_non_mapping_check_section_is_an_error():
    with pytest.raises(ConfigError):
        config.check_defaults({"check": [1]})


def test_non_mapping_logging_section_is_an_error():
    with pytest.raises(ConfigError):
        config.setup_logging({"logging": "DEBUG"})

import json

from pubsub_light.config import Config, get_config_path, load_config, save_config
from pubsub_light.config.loader import camel_to_snake, snake_to_camel


def test_defaults():
    config = Config()

    assert config.output.indent is None
    assert config.output.ensure_ascii is False
    assert config.namespace.reserved_prefix == "jenkins"
    assert config.namespace.warn_reserved is True
    assert config.logging.level == "INFO"


def test_missing_file_returns_defaults(tmp_path):
    config = load_config(tmp_path / "nope.json")
    assert config == Config()


def test_load_camel_case_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "output": {"indent": 2, "sortKeys": True},
        "namespace": {"reservedPrefix": "acme", "warnReserved": False},
        "logging": {"level": "debug"},
    }))

    config = load_config(path)

    assert config.output.indent == 2
    assert config.output.sort_keys is True
    assert config.namespace.reserved_prefix == "acme"
    assert config.namespace.warn_reserved is False
    assert config.logging.level == "DEBUG"


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    assert load_config(path) == Config()


def test_invalid_log_level_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"logging": {"level": "loud"}}))

    assert load_config(path).logging.level == "INFO"


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "config.json"
    config = Config()
    config.output.indent = 4

    save_config(config, path)

    on_disk = json.loads(path.read_text())
    assert on_disk["namespace"]["reservedPrefix"] == "jenkins"
    assert load_config(path).output.indent == 4


def test_env_override(monkeypatch):
    monkeypatch.setenv("PUBSUB_LIGHT_OUTPUT__INDENT", "2")
    assert Config().output.indent == 2


def test_default_config_path_under_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_config_path() == tmp_path / ".pubsub_light" / "config.json"


def test_key_conversion():
    assert camel_to_snake("warnReserved") == "warn_reserved"
    assert snake_to_camel("ensure_ascii") == "ensureAscii"
    assert camel_to_snake("reservedPrefix") == "reserved_prefix"
    assert snake_to_camel("level") == "level"

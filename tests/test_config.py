"""Tests for YAML config management."""

import logging

import yaml

from script_picker import config


class TestLoadConfig:
    def test_defaults_when_missing(self, config_env):
        cfg = config.load_config()
        assert cfg["extension"] == ".sh"
        assert cfg["invocation"]["injector"] == ""
        assert cfg["debug"] is False

    def test_written_values_load(self, write_config):
        write_config({"invocation": {"prefix": "rb "}})

        loaded = config.load_config()
        assert loaded["invocation"]["prefix"] == "rb "

    def test_null_sections_fall_back_to_defaults(self, write_config):
        write_config("ui:\ninvocation:\n")

        cfg = config.load_config()
        assert cfg["ui"] == {"width": 100}
        assert cfg["invocation"] == config.DEFAULT_CONFIG["invocation"]

    def test_scalar_section_falls_back(self, write_config):
        write_config("invocation: tmux\nextension: 7\n")

        cfg = config.load_config()
        assert cfg["invocation"]["injector"] == ""
        assert cfg["extension"] == ".sh"

    def test_bad_numbers_fall_back(self, write_config):
        write_config({"invocation": {"delay": "soon"}, "ui": {"width": "wide"}})

        cfg = config.load_config()
        assert cfg["invocation"]["delay"] == 0.1
        assert cfg["ui"]["width"] == 100

    def test_numeric_strings_converted(self, write_config):
        write_config({"invocation": {"delay": "0.5"}, "ui": {"width": "80"}})

        cfg = config.load_config()
        assert cfg["invocation"]["delay"] == 0.5
        assert cfg["ui"]["width"] == 80

    def test_null_prefix_and_debug(self, write_config):
        write_config("debug:\ninvocation:\n  prefix:\n")

        cfg = config.load_config()
        assert cfg["debug"] is False
        assert cfg["invocation"]["prefix"] == ""

    def test_deep_merge_with_defaults(self, config_env):
        config.get_config_path().write_text(yaml.dump({"invocation": {"injector": "tmux send-keys -l {text}"}}))

        cfg = config.load_config()
        assert cfg["invocation"]["injector"] == "tmux send-keys -l {text}"
        assert cfg["invocation"]["delay"] == 0.1
        assert cfg["ui"]["width"] == 100

    def test_handles_corrupt_yaml(self, config_env):
        config.get_config_path().write_text("invocation: [unclosed")
        assert config.load_config() == config.DEFAULT_CONFIG

    def test_non_mapping_yields_defaults(self, config_env):
        config.get_config_path().write_text("- just\n- a list\n")
        assert config.load_config()["extension"] == ".sh"

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.dump({"extension": ".py"}))
        assert config.load_config(path)["extension"] == ".py"

    def test_defaults_not_mutated(self, config_env):
        cfg = config.load_config()
        cfg["invocation"]["prefix"] = "changed"
        assert config.DEFAULT_CONFIG["invocation"]["prefix"] == ""


class TestPaths:
    def test_xdg_config_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert config.get_config_dir() == tmp_path / "script-picker"
        assert config.get_log_path() == tmp_path / "script-picker" / "debug.log"


class TestSetupLogging:
    def test_debug_writes_log_file(self, tmp_path):
        log_path = tmp_path / "logs" / "debug.log"
        package_logger = logging.getLogger("script_picker")
        before = list(package_logger.handlers)
        try:
            config.setup_logging(True, log_path)
            logging.getLogger("script_picker.catalog").debug("hello from test")
            for handler in package_logger.handlers:
                handler.flush()
            assert "hello from test" in log_path.read_text()
        finally:
            for handler in package_logger.handlers[len(before):]:
                handler.close()
                package_logger.removeHandler(handler)
            package_logger.setLevel(logging.NOTSET)

    def test_no_debug_adds_nothing(self, tmp_path):
        package_logger = logging.getLogger("script_picker")
        before = list(package_logger.handlers)
        config.setup_logging(False, tmp_path / "debug.log")
        assert package_logger.handlers == before
        assert not (tmp_path / "debug.log").exists()

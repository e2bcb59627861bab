"""Tests for configuration loading."""

from pathlib import Path

from taskline.config import Config, ConfigModel


class TestConfigModel:

    def test_defaults(self):
        config = ConfigModel(data_dir="/tmp/taskline-test")

        assert config.data_file == "tasks.txt"
        assert config.log_level == "WARNING"
        assert config.get_data_path() == Path("/tmp/taskline-test/tasks.txt")
        assert config.get_config_path() == Path("/tmp/taskline-test/config.yaml")

    def test_expands_user(self):
        config = ConfigModel(data_dir="~/somewhere")

        assert "~" not in config.data_dir

    def test_yaml_round_trip(self, tmp_path):
        config = ConfigModel(data_dir=str(tmp_path), data_file="mine.txt", no_color=True)

        restored = ConfigModel.from_yaml(config.to_yaml())

        assert restored == config

    def test_from_yaml_ignores_unknown_keys(self, tmp_path):
        restored = ConfigModel.from_yaml(f"data_dir: {tmp_path}\ntheme: dark\n")

        assert restored.data_dir == str(tmp_path)

    def test_from_empty_yaml(self):
        assert ConfigModel.from_yaml("").data_file == "tasks.txt"


class TestConfigManager:

    def test_creates_default_file(self, tmp_path):
        config_path = tmp_path / "config.yaml"

        config = Config.load(config_path)

        assert config_path.exists()
        assert config.data_file == "tasks.txt"

    def test_loads_existing_file(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(f"data_dir: {tmp_path}\ndata_file: other.txt\n", encoding="utf-8")

        config = Config.reload(config_path)

        assert config.data_file == "other.txt"

    def test_malformed_file_falls_back_to_defaults(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- just\n- a list\n", encoding="utf-8")

        config = Config.reload(config_path)

        assert config.data_file == "tasks.txt"

    def test_environment_overrides_data_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TASKLINE_DATA_DIR", str(tmp_path / "env"))
        config_path = tmp_path / "config.yaml"
        config_path.write_text("data_dir: /somewhere/else\n", encoding="utf-8")

        config = Config.reload(config_path)

        assert config.data_dir == str(tmp_path / "env")

    def test_instance_is_cached(self, tmp_path):
        config_path = tmp_path / "config.yaml"

        assert Config.load(config_path) is Config.load(config_path)

    def test_reload_rereads_file(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        first = Config.load(config_path)
        config_path.write_text("data_file: other.txt\n", encoding="utf-8")

        assert Config.load(config_path) is first
        assert Config.reload(config_path).data_file == "other.txt"

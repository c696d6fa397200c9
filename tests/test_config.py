import pytest

from huffarc.config_loader import CONFIG_ENV_VAR, load_config
from huffarc.errors import ConfigError


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch):
	monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def test_packaged_defaults():
	config = load_config()
	assert config["compression"]["strict_frequencies"] is False
	assert config["files"]["archive_suffix"] == ".huf"
	assert config["files"]["restored_suffix"] == ".out"
	assert config["output"]["verbose"] is True


def test_user_file_overrides_single_key(tmp_path):
	path = tmp_path / "config.yaml"
	path.write_text("files:\n  archive_suffix: .hz\n")
	config = load_config(str(path))
	assert config["files"]["archive_suffix"] == ".hz"
	assert config["files"]["restored_suffix"] == ".out"
	assert config["output"]["verbose"] is True


def test_environment_variable(tmp_path, monkeypatch):
	path = tmp_path / "env.yaml"
	path.write_text("compression:\n  strict_frequencies: true\n")
	monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
	assert load_config()["compression"]["strict_frequencies"] is True


def test_empty_file_keeps_defaults(tmp_path):
	path = tmp_path / "empty.yaml"
	path.write_text("")
	assert load_config(str(path)) == load_config()


@pytest.mark.parametrize("text", [
	"unknown:\n  key: 1\n",
	"files:\n  archive_sufix: .x\n",
	"output:\n  verbose: 'yes'\n",
	"- a list\n",
	"files: [1, 2]\n",
	"files: {archive_suffix: [unclosed\n",
])
def test_invalid_config(tmp_path, text):
	path = tmp_path / "bad.yaml"
	path.write_text(text)
	with pytest.raises(ConfigError):
		load_config(str(path))


def test_missing_file(tmp_path):
	with pytest.raises(ConfigError):
		load_config(str(tmp_path / "missing.yaml"))

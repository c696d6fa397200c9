import pytest

from huffarc.cli import default_archive_path, default_restored_path, main
from huffarc.config_loader import CONFIG_ENV_VAR, load_config
from huffarc.files import compress_file, decompress_file


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch):
	monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def test_files_roundtrip(tmp_path):
	source = tmp_path / "input.txt"
	source.write_bytes(b"file contents\n" * 5)
	archive = tmp_path / "arch.bin"
	restored = tmp_path / "output.txt"

	size, archive_size = compress_file(str(source), str(archive))
	assert size == 70
	assert archive_size == archive.stat().st_size

	archive_size, restored_size = decompress_file(str(archive), str(restored))
	assert restored_size == 70
	assert restored.read_bytes() == source.read_bytes()


def test_default_paths():
	config = load_config()
	assert default_archive_path("notes.txt", config) == "notes.txt.huf"
	assert default_restored_path("notes.txt.huf", config) == "notes.txt"
	assert default_restored_path("notes.bin", config) == "notes.bin.out"


def test_compress_then_decompress(tmp_path, capsys):
	source = tmp_path / "data.bin"
	source.write_bytes(bytes(range(256)))

	assert main(["compress", str(source)]) == 0
	archive = tmp_path / "data.bin.huf"
	assert archive.exists()
	assert "Compressed:" in capsys.readouterr().out

	restored = tmp_path / "restored.bin"
	assert main(["decompress", str(archive), str(restored)]) == 0
	assert "Decompressed:" in capsys.readouterr().out
	assert restored.read_bytes() == source.read_bytes()


def test_info(tmp_path, capsys):
	source = tmp_path / "a.txt"
	source.write_bytes(b"aabbbc")
	archive = tmp_path / "a.huf"
	assert main(["compress", str(source), str(archive)]) == 0
	capsys.readouterr()

	assert main(["info", str(archive)]) == 0
	out = capsys.readouterr().out
	assert "Original length:  6 bytes" in out
	assert "Distinct symbols: 3" in out


def test_quiet_config(tmp_path, capsys):
	config = tmp_path / "quiet.yaml"
	config.write_text("output:\n  verbose: false\n")
	source = tmp_path / "q.txt"
	source.write_bytes(b"quiet")
	assert main(["--config", str(config), "compress", str(source)]) == 0
	assert capsys.readouterr().out == ""


def test_strict_flag(tmp_path, capsys):
	source = tmp_path / "big.bin"
	source.write_bytes(b"\x00" * 300)
	assert main(["compress", str(source), "--strict"]) == 1
	assert "Error:" in capsys.readouterr().err
	assert not (tmp_path / "big.bin.huf").exists()


def test_malformed_archive(tmp_path, capsys):
	archive = tmp_path / "short.huf"
	archive.write_bytes(b"\x00" * 100)
	assert main(["decompress", str(archive)]) == 1
	assert "Error:" in capsys.readouterr().err


def test_missing_input(tmp_path, capsys):
	assert main(["compress", str(tmp_path / "nothing.txt")]) == 1
	assert "Error:" in capsys.readouterr().err

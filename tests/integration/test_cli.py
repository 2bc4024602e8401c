import os

from babelfile import __version__, config


def test_encode_decode_roundtrip(cli_test_env):
    """
    Encodes a file to a .babel container and decodes it back, checking the
    restored bytes and the recorded extension.
    """
    run_command, test_dir = cli_test_env
    original_data = os.urandom(500)
    (test_dir / "photo.jpg").write_bytes(original_data)

    # 1. Encode with the default output name
    result = run_command(["encode", "photo.jpg", "--seed", "7", "--workers", "2"])
    assert result.returncode == 0
    assert "Starting encoding process..." in result.stderr
    assert "Encoded photo.jpg to photo.babel" in result.stderr
    assert result.stdout.strip().endswith("photo.babel")

    container = (test_dir / "photo.babel").read_text().splitlines()
    assert container[0] == "jpg"
    assert container[1] == "500"
    assert len(container) == 3

    # 2. Decode to an explicit path
    result = run_command(["decode", "photo.babel", "restored.jpg"])
    assert result.returncode == 0
    assert "Decoded 500 bytes" in result.stderr
    assert (test_dir / "restored.jpg").read_bytes() == original_data


def test_decode_uses_recorded_extension(cli_test_env):
    run_command, test_dir = cli_test_env
    (test_dir / "notes.txt").write_bytes(b"the quick brown fox")

    assert run_command(["encode", "notes.txt", "archive.babel"]).returncode == 0
    result = run_command(["decode", "archive.babel"])
    assert result.returncode == 0
    assert (test_dir / "archive.txt").read_bytes() == b"the quick brown fox"


def test_encode_with_seed_is_repeatable(cli_test_env):
    run_command, test_dir = cli_test_env
    (test_dir / "data.bin").write_bytes(b"\x00\x01\x02\xff" * 50)

    run_command(["encode", "data.bin", "first.babel", "--seed", "42"])
    run_command(["encode", "data.bin", "second.babel", "--seed", "42"])
    assert (test_dir / "first.babel").read_text() == (
        test_dir / "second.babel"
    ).read_text()


def test_encode_missing_file(cli_test_env):
    run_command, _ = cli_test_env
    result = run_command(["encode", "missing.bin"])
    assert result.returncode == 2
    assert "does not exist" in result.stderr


def test_encode_rejects_bad_worker_count(cli_test_env):
    run_command, test_dir = cli_test_env
    (test_dir / "data.bin").write_bytes(b"abc")
    result = run_command(["encode", "data.bin", "--workers", "0"])
    assert result.returncode == 2
    assert not (test_dir / "data.babel").exists()


def test_decode_malformed_container(cli_test_env):
    run_command, test_dir = cli_test_env
    (test_dir / "broken.babel").write_text("txt\nlots\n")
    result = run_command(["decode", "broken.babel"])
    assert result.returncode == 1
    assert "Error decoding file" in result.stderr
    assert "Invalid file size" in result.stderr
    assert not (test_dir / "broken.txt").exists()


def test_locate_then_page(cli_test_env):
    """An address printed by `locate` leads back to the same text via `page`."""
    run_command, _ = cli_test_env
    text = "hello, library of babel."

    result = run_command(["locate", text, "--seed", "3"])
    assert result.returncode == 0
    addr = result.stdout.strip()
    assert len(addr.split(":")) == 5

    result = run_command(["page", addr])
    assert result.returncode == 0
    page = result.stdout.rstrip("\n")
    assert len(page) == config.LENGTH_OF_PAGE
    assert page.startswith(text)

    result = run_command(["page", addr, "--strip"])
    assert result.stdout.rstrip("\n") == text.rstrip(".")


def test_locate_rejects_foreign_characters(cli_test_env):
    run_command, _ = cli_test_env
    result = run_command(["locate", "Hello!"])
    assert result.returncode == 1
    assert "Cannot locate text" in result.stderr


def test_page_invalid_address(cli_test_env):
    run_command, _ = cli_test_env
    result = run_command(["page", "not-an-address"])
    assert result.returncode == 1
    assert "Invalid address" in result.stderr


def test_unknown_command(cli_test_env):
    run_command, _ = cli_test_env
    result = run_command(["shelve", "file.txt"])
    assert result.returncode == 2
    assert "No such command" in result.stderr


def test_version(cli_test_env):
    run_command, _ = cli_test_env
    result = run_command(["--version"])
    assert result.returncode == 0
    assert __version__ in result.stdout


def test_help_with_bad_worker_environment(cli_test_env, monkeypatch):
    """A malformed BABELFILE_WORKERS does not break startup."""
    run_command, _ = cli_test_env
    monkeypatch.setenv("BABELFILE_WORKERS", "auto")
    result = run_command(["--help"])
    assert result.returncode == 0
    assert "encode" in result.stdout


def test_bad_worker_environment_names_the_variable(cli_test_env, monkeypatch):
    run_command, test_dir = cli_test_env
    (test_dir / "data.bin").write_bytes(b"abc")
    monkeypatch.setenv("BABELFILE_WORKERS", "-1")

    result = run_command(["encode", "data.bin"])
    assert result.returncode == 2
    assert "BABELFILE_WORKERS" in result.stderr
    assert "--workers" not in result.stderr.splitlines()[-1]
    assert not (test_dir / "data.babel").exists()

    # An explicit flag takes precedence over the environment
    result = run_command(["encode", "data.bin", "--workers", "1"])
    assert result.returncode == 0


def test_page_overlong_address_field(cli_test_env):
    run_command, _ = cli_test_env
    result = run_command(["page", "Z" * 5000 + ":0:0:00:000"])
    assert result.returncode == 1
    assert "Invalid address" in result.stderr
    assert "Traceback" not in result.stderr


def test_decode_overlong_coordinate_field(cli_test_env):
    run_command, test_dir = cli_test_env
    (test_dir / "bad.babel").write_text("txt\n3\nZ:" + "1" * 5000 + ":0:00:000\n")
    result = run_command(["decode", "bad.babel"])
    assert result.returncode == 1
    assert "Error decoding file" in result.stderr
    assert not (test_dir / "bad.txt").exists()

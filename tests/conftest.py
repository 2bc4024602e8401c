import pytest
import subprocess
import sys

from babelfile import config as babel_config
from babelfile.lib.location import FixedCoordinateSource, LocationCoordinate


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: multi-page encode/decode runs that do heavy big-integer work"
    )


@pytest.fixture
def coordinate():
    """A fixed, valid coordinate."""
    return LocationCoordinate(wall=2, shelf=3, volume=7, page=42)


@pytest.fixture
def fixed_source(coordinate):
    """A coordinate source that always returns the fixed coordinate."""
    return FixedCoordinateSource(coordinate)


@pytest.fixture
def sample_page():
    """A full page using every symbol of the page alphabet."""
    pattern = babel_config.PAGE_ALPHABET
    return (pattern * (babel_config.LENGTH_OF_PAGE // len(pattern) + 1))[
        : babel_config.LENGTH_OF_PAGE
    ]


@pytest.fixture
def cli_test_env(tmp_path, request):
    """
    Sets up a test environment with a temporary directory and a helper for running CLI commands.
    """

    def run_command(cmd):
        full_cmd = [sys.executable, "-m", "babelfile"] + cmd
        result = subprocess.run(
            full_cmd, cwd=tmp_path, capture_output=True, text=True, check=False
        )

        if request.config.getoption("capture") == "no":
            if result.stdout:
                print(result.stdout)
            if result.stderr:
                print(result.stderr, file=sys.stderr)

        if result.returncode != 0:
            print("Error running command:", " ".join(full_cmd))
            print("Stdout:", result.stdout)
            print("Stderr:", result.stderr)
        return result

    return run_command, tmp_path

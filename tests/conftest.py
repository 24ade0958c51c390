import hypothesis
import pytest
from click.testing import CliRunner

hypothesis.settings.register_profile("ci", deadline=None)
hypothesis.settings.load_profile("ci")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def write_config(tmp_path):
    def _write(text: str, name: str = "range.yaml"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write

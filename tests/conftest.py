import pytest


@pytest.fixture(autouse=True)
def temp_logs_dir(monkeypatch, tmp_path):
    """Send every Logger file of a test run into a temporary folder."""
    monkeypatch.setattr("common.utils.project_root", str(tmp_path))
    logs_dir = tmp_path / "logs"
    logs_dir.mkdir(exist_ok=True)
    return logs_dir

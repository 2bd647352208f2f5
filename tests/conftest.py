# ABOUTME: Shared pytest fixtures for configuration, wiki page fixtures and logging cleanup
# ABOUTME: Keeps every test inside a temporary working directory

import pytest
from loguru import logger

from anno_consumption.config import Config, reload_config
from anno_consumption.utils.logging.config import setup_structlog
from anno_consumption.utils.logging.console import set_console_output

FARMER_URL = "https://anno1800.fandom.com/wiki/Farmer_Residence"
WORKER_URL = "https://anno1800.fandom.com/wiki/Worker_Residence"

FARMER_PAGE = """<html>
<body>
<table class="infobox">
<tr><th>Residence</th><td>Farmer Residence</td></tr>
</table>
<table class="wikitable">
<tr><th colspan="2">Farmers</th></tr>
<tr><th>Need</th><th>Consumption</th></tr>
<tr><th><a href="/wiki/Fish">Fish</a></th><td>0.0025</td></tr>
<tr><td>Values per resident per minute</td></tr>
</table>
</body>
</html>
"""

WORKER_PAGE = """<html>
<body>
<table class="wikitable">
<tr><th>Unknown Group</th></tr>
<tr><th>Need</th><td>Sausages</td></tr>
</table>
</body>
</html>
"""


@pytest.fixture(autouse=True)
def isolated_workdir(tmp_path, monkeypatch):
    """Run each test from its own directory and reset global logging state afterwards."""
    monkeypatch.chdir(tmp_path)
    setup_structlog("WARNING")
    yield tmp_path
    set_console_output(True)
    logger.remove()


@pytest.fixture
def config(tmp_path) -> Config:
    """Config rooted in the test's temporary directory, limited to two residences."""
    return Config(
        _env_file=None,
        temp_dir=tmp_path / "temp",
        data_dir=tmp_path / "temp" / "data",
        categories=("Farmer", "Worker"),
    )


@pytest.fixture
def env_config(tmp_path, monkeypatch):
    """Point the global config at the temporary directory through environment variables."""
    overrides = {
        "ANNO_CONSUMPTION_TEMP_DIR": str(tmp_path / "temp"),
        "ANNO_CONSUMPTION_DATA_DIR": str(tmp_path / "temp" / "data"),
        "ANNO_CONSUMPTION_CATEGORIES": '["Farmer", "Worker"]',
    }
    for name, value in overrides.items():
        monkeypatch.setenv(name, value)
    yield reload_config()
    for name in overrides:
        monkeypatch.delenv(name)
    reload_config()


@pytest.fixture
def farmer_url() -> str:
    return FARMER_URL


@pytest.fixture
def worker_url() -> str:
    return WORKER_URL


@pytest.fixture
def farmer_page() -> str:
    """Farmer page with an infobox table followed by the Farmers consumption table."""
    return FARMER_PAGE


@pytest.fixture
def worker_page() -> str:
    """Worker page whose only table matches no residence."""
    return WORKER_PAGE

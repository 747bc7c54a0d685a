from collections.abc import Generator
from pathlib import Path

import pytest

from fakenames.logging.logger import Log

FAKE_NAMES_CSV = (
    "Country,Name,Surname,FakeName,FakeSurname\n"
    "POL,Dawid,Kubacki,Dariusz,Kubecki\n"
    "AUT,Stefan,Kraft,Stefano,Krafft\n"
    "SLO,Domen,Prevc,Doman,Previc\n"
)


@pytest.fixture(autouse=True)
def _reset_log_handlers() -> Generator[None, None, None]:
    """Drop handlers bound to a previous test's captured streams."""
    yield
    for handler in list(Log._logger.handlers):
        Log._logger.removeHandler(handler)


@pytest.fixture()
def fake_names_csv() -> str:
    return FAKE_NAMES_CSV


@pytest.fixture()
def project_root(tmp_path: Path, fake_names_csv: str) -> Path:
    """A project root with a fake-names table and a small UI build."""
    (tmp_path / "fakeNames.csv").write_text(fake_names_csv, encoding="utf-8")

    dist = tmp_path / "packages" / "ui" / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text("<title>Ski Jumping</title>", encoding="utf-8")
    (dist / "assets" / "index.js").write_text(
        'const rows="POL,Dawid,Kubacki\\nAUT, Stefan , Kraft";',
        encoding="utf-8",
    )
    (dist / "assets" / "index.js.map").write_text(
        '{"sources":["POL,Dawid,Kubacki"]}',
        encoding="utf-8",
    )
    (dist / "assets" / "men_jumpers.csv").write_text(
        "Country,Name,Surname\nSLO,Domen,Prevc\n",
        encoding="utf-8",
    )
    (dist / "assets" / "logo.svg").write_text("POL,Dawid,Kubacki", encoding="utf-8")
    return tmp_path


@pytest.fixture()
def dist_path(project_root: Path) -> Path:
    return project_root / "packages" / "ui" / "dist"

import importlib.util
from pathlib import Path

import pytest

from conftest import make_set

_SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "print_report.py"


@pytest.fixture(scope="module")
def print_report():
    spec = importlib.util.spec_from_file_location("print_report", _SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_main_prints_bundled_report(print_report, capsys):
    assert print_report.main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Lego names starting with the String 'lava':\nLava Slammer\n")
    assert "The longest theme name:\nCollectable Minifigures\n" in out


def test_main_uses_data_dir_and_options(print_report, write_dataset, capsys):
    data_dir = write_dataset([make_set(name="Sandcrawler", theme="Star Wars", pieces=3296)])
    assert print_report.main(["--data-dir", data_dir, "--prefix", "sand", "--max-tags", "2"]) == 0
    out = capsys.readouterr().out
    assert "'sand':\nSandcrawler\n" in out
    assert "Do all sets have at most 500 pieces?\nFalse\n" in out


def test_main_fails_when_dataset_cannot_load(print_report, tmp_path, capsys):
    assert print_report.main(["--data-dir", str(tmp_path)]) == 1
    assert capsys.readouterr().out == ""


def test_main_fails_on_invalid_dataset(print_report, write_dataset):
    data_dir = write_dataset([make_set(pieces=-5)])
    assert print_report.main(["--data-dir", data_dir]) == 1

import json
import sys
from pathlib import Path

import pytest

# Ensure project root on sys.path
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from brickset.application.lego_set_service import LegoSetService
from brickset.infrastructure.json_repository import LegoSetRepository


def make_set(number="1000-1", name="Test Set", theme="City", subtheme=None, tags=None,
             pieces=100, packaging="Box", **extra):
    record = {
        "number": number,
        "name": name,
        "theme": theme,
        "subtheme": subtheme,
        "tags": tags,
        "pieces": pieces,
        "packaging": packaging,
    }
    record.update(extra)
    return record


@pytest.fixture()
def write_dataset(tmp_path):
    """Write records (or raw text) as brickset.json and return the directory."""
    def _write(records, raw=None):
        path = tmp_path / LegoSetRepository.RESOURCE_NAME
        path.write_text(raw if raw is not None else json.dumps(records), encoding="utf-8")
        return str(tmp_path)
    return _write


@pytest.fixture()
def service_for(write_dataset):
    def _service(records):
        return LegoSetService(LegoSetRepository(data_dir=write_dataset(records)))
    return _service

import logging
from functools import lru_cache
from typing import Optional

from . import config
from .services.dataset import read_raw_records
from .services.normalize import normalize_records
from .services.selection import SelectionCoordinator

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_coordinator() -> SelectionCoordinator:
    return SelectionCoordinator()


def load_dataset_into(coordinator: SelectionCoordinator, path: Optional[str] = None) -> int:
    """Read, normalize and hand the releases file to the coordinator. Returns the record count."""
    records = normalize_records(read_raw_records(path or config.DATA_PATH))
    coordinator.load(records)
    return len(records)

# storage.py
import json
import os
from pathlib import Path
from typing import List, Dict

PROJECTS_FILENAME = "projects.json"
TASKS_FILENAME = "tasks.json"


def get_data_dir() -> Path:
    """Directory holding the collection files. Read from the environment on every call."""
    return Path(os.getenv("DATA_DIR", "."))


class JsonCollection:
    """
    One entity collection persisted as a single JSON array file.
    Every read loads the whole file and every write rewrites it.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def read(self) -> List[Dict]:
        if not self.path.exists():
            return []
        # TODO: Consider adding a file lock to prevent lost updates on concurrent writes
        with open(self.path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def write(self, records: List[Dict]):
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(records, f, indent=2, ensure_ascii=False)

    def initialize(self):
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.write([])
            print(f"Initialized empty collection file: {self.path}")


def next_id(records: List[Dict]) -> int:
    return max((r["id"] for r in records), default=0) + 1


def projects_collection() -> JsonCollection:
    return JsonCollection(get_data_dir() / PROJECTS_FILENAME)


def tasks_collection() -> JsonCollection:
    return JsonCollection(get_data_dir() / TASKS_FILENAME)


def initialize_storage():
    projects_collection().initialize()
    tasks_collection().initialize()

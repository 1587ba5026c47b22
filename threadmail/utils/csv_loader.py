"""Load demo mailbox data from the CSV files shipped in threadmail/data."""

import csv
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any, Union

DataDir = Union[Traversable, Path]

DEMO_DATA_DIR: Traversable = resources.files("threadmail") / "data"
DEMO_FILES = ("users.csv", "folders.csv", "threads.csv", "emails.csv", "thread_folders.csv")


def missing_demo_files(data_dir: DataDir | None = None) -> list[str]:
    """Names of the demo CSVs that are not present in data_dir."""
    base = data_dir or DEMO_DATA_DIR
    return [name for name in DEMO_FILES if not base.joinpath(name).is_file()]


def _read_csv(data_dir: DataDir | None, name: str) -> list[dict[str, Any]]:
    """Read a CSV file and return list of row dicts; a missing file reads as no rows."""
    path = (data_dir or DEMO_DATA_DIR).joinpath(name)
    if not path.is_file():
        return []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        return list(reader)


def load_users(data_dir: DataDir | None = None) -> list[dict[str, Any]]:
    """Load users from users.csv."""
    return _read_csv(data_dir, "users.csv")


def load_folders(data_dir: DataDir | None = None) -> list[dict[str, Any]]:
    """Load folders from folders.csv."""
    return _read_csv(data_dir, "folders.csv")


def load_threads(data_dir: DataDir | None = None) -> list[dict[str, Any]]:
    """Load threads from threads.csv."""
    return _read_csv(data_dir, "threads.csv")


def load_emails(data_dir: DataDir | None = None) -> list[dict[str, Any]]:
    """Load emails from emails.csv."""
    return _read_csv(data_dir, "emails.csv")


def load_thread_folders(data_dir: DataDir | None = None) -> list[dict[str, Any]]:
    """Load thread/folder membership rows from thread_folders.csv."""
    return _read_csv(data_dir, "thread_folders.csv")

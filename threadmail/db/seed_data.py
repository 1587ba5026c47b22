"""Seed a new database from the demo CSV files packaged in threadmail/data."""

from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from threadmail.db.models.mailbox import Email, Folder, Thread, ThreadFolder, User
from threadmail.utils.csv_loader import (
    DataDir,
    load_emails,
    load_folders,
    load_thread_folders,
    load_threads,
    load_users,
    missing_demo_files,
)
from threadmail.utils.logger import get_logger

logger = get_logger("threadmail.db.seed_data")

_USER_PROFILE_FIELDS = ("job_title", "company", "location", "avatar_url", "linkedin", "twitter", "github")


def _text(val: Any) -> str | None:
    if val is None:
        return None
    s = str(val).strip()
    return s or None


def _parse_datetime(val: Any) -> datetime | None:
    s = _text(val)
    if s is None:
        return None
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00"))
    except (TypeError, ValueError):
        return None


def seed_mock_data(session: Session, data_dir: DataDir | None = None) -> int:
    """Insert demo rows in FK order: users, folders, threads, emails, thread_folders.

    Each thread's last_activity_date is set to the newest sent_date among its emails.
    Returns the number of rows inserted; missing CSV files are logged and read as empty.
    """
    missing = missing_demo_files(data_dir)
    if missing:
        logger.warning("seed.demo_data_missing", missing=missing)

    users = load_users(data_dir)
    for r in users:
        email = _text(r.get("email"))
        if not email:
            continue
        session.add(
            User(
                id=_text(r.get("id")),
                first_name=_text(r.get("first_name")),
                last_name=_text(r.get("last_name")),
                email=email,
                **{field: _text(r.get(field)) for field in _USER_PROFILE_FIELDS},
            )
        )

    folder_ids: dict[str, int] = {}
    for r in load_folders(data_dir):
        name = _text(r.get("name"))
        if not name:
            continue
        folder = Folder(name=name)
        session.add(folder)
        session.flush()
        folder_ids[name] = folder.id

    threads: dict[str, Thread] = {}
    for r in load_threads(data_dir):
        thread_id = _text(r.get("id"))
        if not thread_id:
            continue
        thread = Thread(id=thread_id, subject=_text(r.get("subject")))
        session.add(thread)
        threads[thread_id] = thread
    session.flush()

    email_count = 0
    for r in load_emails(data_dir):
        thread_id = _text(r.get("thread_id"))
        sent_date = _parse_datetime(r.get("sent_date"))
        session.add(
            Email(
                id=_text(r.get("id")),
                subject=_text(r.get("subject")),
                body=_text(r.get("body")),
                sent_date=sent_date,
                sender_id=_text(r.get("sender_id")),
                recipient_id=_text(r.get("recipient_id")),
                thread_id=thread_id,
            )
        )
        email_count += 1
        thread = threads.get(thread_id) if thread_id else None
        if thread is not None and sent_date is not None:
            if thread.last_activity_date is None or sent_date > thread.last_activity_date:
                thread.last_activity_date = sent_date

    link_count = 0
    for r in load_thread_folders(data_dir):
        thread_id = _text(r.get("thread_id"))
        folder_id = folder_ids.get(_text(r.get("folder")) or "")
        if thread_id not in threads or folder_id is None:
            logger.warning("seed.thread_folder.skipped", thread_id=thread_id, folder=r.get("folder"))
            continue
        session.add(ThreadFolder(thread_id=thread_id, folder_id=folder_id))
        link_count += 1

    session.flush()
    logger.info(
        "seed.done",
        users=len(users),
        folders=len(folder_ids),
        threads=len(threads),
        emails=email_count,
        thread_folders=link_count,
    )
    return len(users) + len(folder_ids) + len(threads) + email_count + link_count

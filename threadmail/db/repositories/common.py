"""Query pieces shared by the mailbox repositories: orderings and per-thread picks."""

from typing import Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload

from threadmail.db.models.mailbox import Email, Folder, Thread, ThreadFolder

# Undated rows sort after dated ones; id breaks ties so repeated calls agree.
THREADS_NEWEST_FIRST = (Thread.last_activity_date.desc().nulls_last(), Thread.id)
EMAILS_NEWEST_FIRST = (Email.sent_date.desc().nulls_last(), Email.id)
EMAILS_OLDEST_FIRST = (Email.sent_date.asc().nulls_last(), Email.id)


def latest_emails(session: Session, thread_ids: Iterable[str]) -> dict[str, Email]:
    """Return {thread_id: newest email} with senders loaded. Threads without emails are absent."""
    ids = list(thread_ids)
    if not ids:
        return {}
    rank = (
        func.row_number()
        .over(partition_by=Email.thread_id, order_by=EMAILS_NEWEST_FIRST)
        .label("rank")
    )
    ranked = select(Email.id, rank).where(Email.thread_id.in_(ids)).subquery()
    q = (
        select(Email)
        .join(ranked, ranked.c.id == Email.id)
        .where(ranked.c.rank == 1)
        .options(joinedload(Email.sender))
    )
    return {email.thread_id: email for email in session.scalars(q).all()}


def first_folder_names(session: Session, thread_ids: Iterable[str]) -> dict[str, str]:
    """Return {thread_id: name of the earliest-created folder holding it}. Unfiled threads are absent."""
    ids = list(thread_ids)
    if not ids:
        return {}
    rank = (
        func.row_number()
        .over(partition_by=ThreadFolder.thread_id, order_by=Folder.id)
        .label("rank")
    )
    ranked = (
        select(ThreadFolder.thread_id, Folder.name, rank)
        .join(Folder, Folder.id == ThreadFolder.folder_id)
        .where(ThreadFolder.thread_id.in_(ids))
        .subquery()
    )
    rows = session.execute(select(ranked.c.thread_id, ranked.c.name).where(ranked.c.rank == 1)).all()
    return {thread_id: name for thread_id, name in rows}


def in_folder(folder_name: str):
    """EXISTS clause: the thread is linked to the folder with this (canonical) name."""
    return Thread.thread_folders.any(ThreadFolder.folder.has(Folder.name == folder_name))

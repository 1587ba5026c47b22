"""Folder repository: folder names with thread counts, special folders first."""

from sqlalchemy import distinct, func, select

from threadmail.db import get_session
from threadmail.db.models.mailbox import Folder, ThreadFolder
from threadmail.models.mailbox import FolderCount, FolderSummary

SPECIAL_FOLDERS = ("Inbox", "Flagged", "Sent")


def get_folders_with_thread_count() -> FolderSummary:
    """Count distinct threads per folder and split into special folders (fixed order) and the rest (store order)."""
    with get_session() as session:
        q = (
            select(Folder.name, func.count(distinct(ThreadFolder.thread_id)))
            .outerjoin(ThreadFolder, ThreadFolder.folder_id == Folder.id)
            .group_by(Folder.id, Folder.name)
            .order_by(Folder.id)
        )
        folders = [FolderCount(name=name, thread_count=count) for name, count in session.execute(q).all()]

    by_name = {f.name: f for f in folders}
    special = [by_name[name] for name in SPECIAL_FOLDERS if name in by_name]
    other = [f for f in folders if f.name not in SPECIAL_FOLDERS]
    return FolderSummary(special_folders=special, other_folders=other)

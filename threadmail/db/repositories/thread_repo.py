"""Thread repository: folder listings, single-thread lookup within a folder, full conversation."""

from collections import defaultdict
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from threadmail.db import get_session
from threadmail.db.models.mailbox import Email, Folder, Thread, ThreadFolder
from threadmail.db.repositories.common import (
    EMAILS_NEWEST_FIRST,
    EMAILS_OLDEST_FIRST,
    THREADS_NEWEST_FIRST,
    in_folder,
    latest_emails,
)
from threadmail.models.mailbox import (
    ConversationEmail,
    ConversationSender,
    FolderThread,
    ListedEmail,
    SenderSummary,
    ThreadConversation,
    ThreadInFolder,
)
from threadmail.utils.logger import get_logger
from threadmail.utils.text import canonical_folder_name, require_id

logger = get_logger("threadmail.db.thread_repo")


def _listed_email(email: Email) -> ListedEmail:
    sender = email.sender
    return ListedEmail(
        id=email.id,
        subject=email.subject,
        body=email.body,
        sent_date=email.sent_date,
        sender_id=email.sender_id,
        recipient_id=email.recipient_id,
        thread_id=email.thread_id,
        sender=(
            SenderSummary(id=sender.id, first_name=sender.first_name, last_name=sender.last_name, email=sender.email)
            if sender is not None
            else None
        ),
    )


def get_threads_for_folder(folder_name: str) -> list[FolderThread]:
    """Return threads in the folder, most recent activity first, each with all emails newest first.

    folder_name may be percent-encoded and in any case. Unknown or empty folder: [].
    A thread with no emails is returned with emails=[].
    """
    folder = canonical_folder_name(folder_name)
    with get_session() as session:
        q = (
            select(Thread)
            .join(ThreadFolder, ThreadFolder.thread_id == Thread.id)
            .join(Folder, Folder.id == ThreadFolder.folder_id)
            .where(Folder.name == folder)
            .order_by(*THREADS_NEWEST_FIRST)
        )
        threads = list(session.scalars(q).all())
        if not threads:
            logger.debug("mailbox.folder_threads.empty", folder=folder)
            return []

        emails_q = (
            select(Email)
            .where(Email.thread_id.in_([t.id for t in threads]))
            .options(joinedload(Email.sender))
            .order_by(*EMAILS_NEWEST_FIRST)
        )
        emails_by_thread: dict[str, list[ListedEmail]] = defaultdict(list)
        for email in session.scalars(emails_q).all():
            emails_by_thread[email.thread_id].append(_listed_email(email))

        result = [
            FolderThread(
                id=t.id,
                subject=t.subject,
                last_activity_date=t.last_activity_date,
                emails=emails_by_thread.get(t.id, []),
            )
            for t in threads
        ]
    logger.debug("mailbox.folder_threads.done", folder=folder, threads=len(result))
    return result


def get_thread_in_folder(folder_name: str, thread_id: str) -> Optional[ThreadInFolder]:
    """Return the thread header (newest email's sender) only if the thread is filed in that folder; else None."""
    folder = canonical_folder_name(folder_name)
    thread_id = require_id(thread_id, "thread_id")
    with get_session() as session:
        thread = session.scalars(
            select(Thread).where(Thread.id == thread_id).where(in_folder(folder))
        ).first()
        if thread is None:
            return None
        latest = latest_emails(session, [thread.id]).get(thread.id)
        sender = latest.sender if latest is not None else None
        return ThreadInFolder(
            id=thread.id,
            subject=thread.subject,
            last_activity_date=thread.last_activity_date,
            sender_first_name=sender.first_name if sender else None,
            sender_last_name=sender.last_name if sender else None,
            sender_email=sender.email if sender else None,
        )


def get_emails_for_thread(thread_id: str) -> Optional[ThreadConversation]:
    """Return the thread with its emails in conversation order (oldest first), or None if it does not exist."""
    thread_id = require_id(thread_id, "thread_id")
    with get_session() as session:
        thread = session.get(Thread, thread_id)
        if thread is None:
            return None
        q = (
            select(Email)
            .where(Email.thread_id == thread.id)
            .options(joinedload(Email.sender))
            .order_by(*EMAILS_OLDEST_FIRST)
        )
        emails = []
        for email in session.scalars(q).all():
            sender = email.sender
            emails.append(
                ConversationEmail(
                    id=email.id,
                    body=email.body,
                    sent_date=email.sent_date,
                    sender=(
                        ConversationSender(id=sender.id, first_name=sender.first_name, last_name=sender.last_name)
                        if sender is not None
                        else None
                    ),
                    recipient_id=email.recipient_id,
                )
            )
        return ThreadConversation(id=thread.id, subject=thread.subject, emails=emails)

"""Search repository: case-insensitive substring search over threads, emails and senders."""

from typing import Optional

from sqlalchemy import or_, select

from threadmail.config import SEARCH_RESULT_LIMIT
from threadmail.db import get_session
from threadmail.db.models.mailbox import Email, Thread, User
from threadmail.db.repositories.common import THREADS_NEWEST_FIRST, first_folder_names, latest_emails
from threadmail.models.mailbox import SearchEmailPreview, SearchResult, SearchSender
from threadmail.utils.logger import get_logger

logger = get_logger("threadmail.db.search_repo")


def _match(query: str):
    """Thread subject, or any email body / sender first name / last name / address, contains query."""
    sender_match = or_(
        User.first_name.icontains(query, autoescape=True),
        User.last_name.icontains(query, autoescape=True),
        User.email.icontains(query, autoescape=True),
    )
    email_match = or_(
        Email.body.icontains(query, autoescape=True),
        Email.sender.has(sender_match),
    )
    return or_(
        Thread.subject.icontains(query, autoescape=True),
        Thread.emails.any(email_match),
    )


def _preview(email: Email) -> SearchEmailPreview:
    sender = email.sender
    return SearchEmailPreview(
        id=email.id,
        subject=email.subject,
        body=email.body,
        sent_date=email.sent_date,
        sender=(
            SearchSender(first_name=sender.first_name, last_name=sender.last_name, email=sender.email)
            if sender is not None
            else None
        ),
    )


def search_threads(query: Optional[str], limit: int | None = None) -> list[SearchResult]:
    """Return matching threads by last activity (newest first), flattened to one preview each.

    Empty or missing query returns [] without touching the database. No relevance
    ranking: a subject hit and a sender hit are ordered only by activity date.
    """
    if not query:
        return []
    cap = SEARCH_RESULT_LIMIT if limit is None else limit
    with get_session() as session:
        q = select(Thread).where(_match(query)).order_by(*THREADS_NEWEST_FIRST)
        if cap and cap > 0:
            q = q.limit(cap)
        threads = list(session.scalars(q).all())
        ids = [t.id for t in threads]
        latest = latest_emails(session, ids)
        folders = first_folder_names(session, ids)
        results = [
            SearchResult(
                id=t.id,
                subject=t.subject,
                last_activity_date=t.last_activity_date,
                folder_name=folders.get(t.id),
                latest_email=_preview(latest[t.id]) if t.id in latest else None,
            )
            for t in threads
        ]
    logger.debug("mailbox.search.done", query=query, hits=len(results))
    return results

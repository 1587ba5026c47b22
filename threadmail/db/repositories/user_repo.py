"""User repository: address book and profile with recent authored threads."""

from typing import Optional

from sqlalchemy import select

from threadmail.db import get_session
from threadmail.db.models.mailbox import Email, Thread, User
from threadmail.db.repositories.common import THREADS_NEWEST_FIRST
from threadmail.models.mailbox import AddressBookEntry, RecentThread, UserProfile
from threadmail.utils.text import require_id

PROFILE_RECENT_THREADS = 3


def get_all_email_addresses() -> list[AddressBookEntry]:
    """Return every user's name parts and address, ordered by address."""
    with get_session() as session:
        rows = session.execute(
            select(User.first_name, User.last_name, User.email).order_by(User.email)
        ).all()
    return [AddressBookEntry(first_name=first, last_name=last, email=email) for first, last, email in rows]


def get_user_profile(user_id: str) -> Optional[UserProfile]:
    """Return profile fields plus subjects of the user's 3 most recently active authored threads; None if unknown."""
    user_id = require_id(user_id, "user_id")
    with get_session() as session:
        user = session.get(User, user_id)
        if user is None:
            return None
        subjects = session.scalars(
            select(Thread.subject)
            .where(Thread.emails.any(Email.sender_id == user.id))
            .order_by(*THREADS_NEWEST_FIRST)
            .limit(PROFILE_RECENT_THREADS)
        ).all()
        return UserProfile(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            job_title=user.job_title,
            company=user.company,
            location=user.location,
            avatar_url=user.avatar_url,
            linkedin=user.linkedin,
            twitter=user.twitter,
            github=user.github,
            latest_threads=[RecentThread(subject=s) for s in subjects],
        )

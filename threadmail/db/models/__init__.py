"""Re-export all ORM models so Base.metadata has all tables."""

from threadmail.db.models.mailbox import Email, Folder, Thread, ThreadFolder, User

__all__ = [
    "User",
    "Thread",
    "Email",
    "Folder",
    "ThreadFolder",
]

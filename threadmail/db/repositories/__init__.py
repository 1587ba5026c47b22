"""Mailbox repositories: read-only functions that return pydantic result models."""

from threadmail.db.repositories.folder_repo import get_folders_with_thread_count
from threadmail.db.repositories.search_repo import search_threads
from threadmail.db.repositories.thread_repo import (
    get_emails_for_thread,
    get_thread_in_folder,
    get_threads_for_folder,
)
from threadmail.db.repositories.user_repo import get_all_email_addresses, get_user_profile

__all__ = [
    "get_folders_with_thread_count",
    "get_threads_for_folder",
    "search_threads",
    "get_thread_in_folder",
    "get_emails_for_thread",
    "get_all_email_addresses",
    "get_user_profile",
]

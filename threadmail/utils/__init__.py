"""Utility modules."""

from threadmail.utils.csv_loader import load_emails, load_folders, load_thread_folders, load_threads, load_users
from threadmail.utils.logger import bind_context, clear_context, get_logger
from threadmail.utils.text import canonical_folder_name, format_email_string, require_id, to_title_case

__all__ = [
    "load_users",
    "load_folders",
    "load_threads",
    "load_emails",
    "load_thread_folders",
    "get_logger",
    "bind_context",
    "clear_context",
    "canonical_folder_name",
    "format_email_string",
    "require_id",
    "to_title_case",
]

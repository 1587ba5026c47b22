"""Result shapes returned by the mailbox repositories.

Each read operation has its own model: folder listings are nested (thread with
all of its emails), search hits and single-thread lookups are flattened
previews, and the conversation view carries emails oldest first. They are kept
separate on purpose so that changing one view never changes another.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from threadmail.utils.text import format_email_string


class MailboxModel(BaseModel):
    """Immutable result with camelCase JSON aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# --- Folder summary ---


class FolderCount(MailboxModel):
    name: str
    thread_count: int


class FolderSummary(MailboxModel):
    """Inbox, Flagged and Sent (in that order, when present) followed by every other folder."""

    special_folders: list[FolderCount]
    other_folders: list[FolderCount]


# --- Folder thread listing ---


class SenderSummary(MailboxModel):
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: str


class ListedEmail(MailboxModel):
    id: str
    subject: Optional[str] = None
    body: Optional[str] = None
    sent_date: Optional[datetime] = None
    sender_id: Optional[str] = None
    recipient_id: Optional[str] = None
    thread_id: Optional[str] = None
    sender: Optional[SenderSummary] = None


class FolderThread(MailboxModel):
    """Thread in a folder listing, emails newest first.

    emails can be empty for a thread whose messages are missing; read the
    preview through latest_email, which is None in that case.
    """

    id: str
    subject: Optional[str] = None
    last_activity_date: Optional[datetime] = None
    emails: list[ListedEmail]

    @property
    def latest_email(self) -> Optional[ListedEmail]:
        return self.emails[0] if self.emails else None


# --- Search ---


class SearchSender(MailboxModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: str


class SearchEmailPreview(MailboxModel):
    id: str
    subject: Optional[str] = None
    body: Optional[str] = None
    sent_date: Optional[datetime] = None
    sender: Optional[SearchSender] = None

    @property
    def display_sender(self) -> str:
        if self.sender is None:
            return ""
        return format_email_string(self.sender.first_name, self.sender.last_name, self.sender.email)


class SearchResult(MailboxModel):
    id: str
    subject: Optional[str] = None
    last_activity_date: Optional[datetime] = None
    folder_name: Optional[str] = None
    latest_email: Optional[SearchEmailPreview] = None


# --- Thread lookup within a folder ---


class ThreadInFolder(MailboxModel):
    """Flattened thread header; sender fields come from the newest email and are None without one."""

    id: str
    subject: Optional[str] = None
    last_activity_date: Optional[datetime] = None
    sender_first_name: Optional[str] = None
    sender_last_name: Optional[str] = None
    sender_email: Optional[str] = None


# --- Thread detail ---


class ConversationSender(MailboxModel):
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class ConversationEmail(MailboxModel):
    id: str
    body: Optional[str] = None
    sent_date: Optional[datetime] = None
    sender: Optional[ConversationSender] = None
    recipient_id: Optional[str] = None


class ThreadConversation(MailboxModel):
    """Full thread, emails oldest first."""

    id: str
    subject: Optional[str] = None
    emails: list[ConversationEmail]


# --- Directory and profile ---


class AddressBookEntry(MailboxModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: str


class RecentThread(MailboxModel):
    subject: Optional[str] = None


class UserProfile(MailboxModel):
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: str
    job_title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    avatar_url: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    github: Optional[str] = None
    latest_threads: list[RecentThread]

"""Pydantic result models."""

from threadmail.models.mailbox import (
    AddressBookEntry,
    ConversationEmail,
    ConversationSender,
    FolderCount,
    FolderSummary,
    FolderThread,
    ListedEmail,
    RecentThread,
    SearchEmailPreview,
    SearchResult,
    SearchSender,
    SenderSummary,
    ThreadConversation,
    ThreadInFolder,
    UserProfile,
)

__all__ = [
    "FolderCount",
    "FolderSummary",
    "SenderSummary",
    "ListedEmail",
    "FolderThread",
    "SearchSender",
    "SearchEmailPreview",
    "SearchResult",
    "ThreadInFolder",
    "ConversationSender",
    "ConversationEmail",
    "ThreadConversation",
    "AddressBookEntry",
    "RecentThread",
    "UserProfile",
]

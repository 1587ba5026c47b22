"""Mailbox API routes: folders, folder listings, thread lookup and detail, search, users."""

import asyncio
from typing import Any, Callable, Optional, TypeVar
from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Query

from threadmail.db.repositories import (
    get_all_email_addresses,
    get_emails_for_thread,
    get_folders_with_thread_count,
    get_thread_in_folder,
    get_threads_for_folder,
    get_user_profile,
    search_threads,
)
from threadmail.models.mailbox import (
    AddressBookEntry,
    FolderSummary,
    FolderThread,
    SearchResult,
    ThreadConversation,
    ThreadInFolder,
    UserProfile,
)
from threadmail.utils.logger import get_logger

logger = get_logger("threadmail.api.routes")

router = APIRouter(prefix="/api", tags=["mailbox"])

T = TypeVar("T")


async def _run(fn: Callable[..., T], *args: Any) -> T:
    """Run a repository call in a worker thread. Bad input becomes 400; database errors propagate."""
    try:
        return await asyncio.to_thread(fn, *args)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


def _routed_folder(folder_name: str) -> str:
    """Re-encode a path parameter Starlette already decoded, so the repository decodes it exactly once."""
    return quote(folder_name, safe="")


def _found(value: Optional[T], what: str) -> T:
    if value is None:
        raise HTTPException(status_code=404, detail=f"{what} not found")
    return value


@router.get("/folders", response_model=FolderSummary)
async def list_folders() -> FolderSummary:
    """Folder names with thread counts; Inbox, Flagged, Sent first."""
    return await _run(get_folders_with_thread_count)


@router.get("/folders/{folder_name}/threads", response_model=list[FolderThread])
async def list_folder_threads(folder_name: str) -> list[FolderThread]:
    """Threads in a folder with all emails, newest first. Unknown folder: empty list."""
    return await _run(get_threads_for_folder, _routed_folder(folder_name))


@router.get("/folders/{folder_name}/threads/{thread_id}", response_model=ThreadInFolder)
async def get_folder_thread(folder_name: str, thread_id: str) -> ThreadInFolder:
    """Thread header, only if the thread is filed in that folder."""
    thread = await _run(get_thread_in_folder, _routed_folder(folder_name), thread_id)
    return _found(thread, "Thread")


@router.get("/threads/{thread_id}", response_model=ThreadConversation)
async def get_thread(thread_id: str) -> ThreadConversation:
    """Full conversation, oldest email first."""
    conversation = await _run(get_emails_for_thread, thread_id)
    return _found(conversation, "Thread")


@router.get("/search", response_model=list[SearchResult])
async def search(
    q: Optional[str] = Query(None, description="Case-insensitive substring to look for"),
    limit: Optional[int] = Query(None, ge=1, le=500),
) -> list[SearchResult]:
    """Threads whose subject, email bodies or senders contain q. Missing or empty q: empty list."""
    results = await _run(search_threads, q, limit)
    logger.info("api.search", query=q, hits=len(results))
    return results


@router.get("/users", response_model=list[AddressBookEntry])
async def list_users() -> list[AddressBookEntry]:
    """Address book: every user's name and email."""
    return await _run(get_all_email_addresses)


@router.get("/users/{user_id}", response_model=UserProfile)
async def get_user(user_id: str) -> UserProfile:
    """Profile plus the user's three most recently active authored threads."""
    profile = await _run(get_user_profile, user_id)
    return _found(profile, "User")

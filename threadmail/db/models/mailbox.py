"""ORM models for the mailbox: User, Thread, Email, Folder and the ThreadFolder association."""

from datetime import datetime

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from threadmail.db.base import Base, StringIdMixin, TimestampMixin


class User(Base, StringIdMixin, TimestampMixin):
    """Mail user: identity plus optional profile fields. Provisioned outside this service."""

    __tablename__ = "users"

    first_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False, index=True)
    job_title: Mapped[str | None] = mapped_column(String(256), nullable=True)
    company: Mapped[str | None] = mapped_column(String(256), nullable=True)
    location: Mapped[str | None] = mapped_column(String(256), nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    linkedin: Mapped[str | None] = mapped_column(String(512), nullable=True)
    twitter: Mapped[str | None] = mapped_column(String(512), nullable=True)
    github: Mapped[str | None] = mapped_column(String(512), nullable=True)

    sent_emails: Mapped[list["Email"]] = relationship(
        "Email", back_populates="sender", foreign_keys="Email.sender_id"
    )
    received_emails: Mapped[list["Email"]] = relationship(
        "Email", back_populates="recipient", foreign_keys="Email.recipient_id"
    )


class Thread(Base, StringIdMixin, TimestampMixin):
    """Conversation. last_activity_date mirrors the newest sent_date and is kept up to date by the writer."""

    __tablename__ = "threads"

    subject: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    last_activity_date: Mapped[datetime | None] = mapped_column(nullable=True, index=True)

    emails: Mapped[list["Email"]] = relationship("Email", back_populates="thread")
    thread_folders: Mapped[list["ThreadFolder"]] = relationship("ThreadFolder", back_populates="thread")


class Email(Base, StringIdMixin, TimestampMixin):
    """Single message; belongs to at most one thread."""

    __tablename__ = "emails"

    subject: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    body: Mapped[str | None] = mapped_column(Text, nullable=True)
    sent_date: Mapped[datetime | None] = mapped_column(nullable=True, index=True)
    sender_id: Mapped[str | None] = mapped_column(ForeignKey("users.id"), nullable=True, index=True)
    recipient_id: Mapped[str | None] = mapped_column(ForeignKey("users.id"), nullable=True)
    thread_id: Mapped[str | None] = mapped_column(ForeignKey("threads.id"), nullable=True, index=True)

    sender: Mapped["User | None"] = relationship(
        "User", back_populates="sent_emails", foreign_keys=[sender_id]
    )
    recipient: Mapped["User | None"] = relationship(
        "User", back_populates="received_emails", foreign_keys=[recipient_id]
    )
    thread: Mapped["Thread | None"] = relationship("Thread", back_populates="emails")


class Folder(Base, TimestampMixin):
    """Named folder. Names are stored title-cased ("Inbox", "Sent", "Project Alpha")."""

    __tablename__ = "folders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(256), unique=True, nullable=False)

    thread_folders: Mapped[list["ThreadFolder"]] = relationship("ThreadFolder", back_populates="folder")


class ThreadFolder(Base):
    """Set-like membership of a thread in a folder; identity is (thread_id, folder_id)."""

    __tablename__ = "thread_folders"

    thread_id: Mapped[str] = mapped_column(ForeignKey("threads.id"), primary_key=True)
    folder_id: Mapped[int] = mapped_column(ForeignKey("folders.id"), primary_key=True, index=True)

    thread: Mapped["Thread"] = relationship("Thread", back_populates="thread_folders")
    folder: Mapped["Folder"] = relationship("Folder", back_populates="thread_folders")

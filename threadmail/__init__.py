"""Threaded mailbox: read-side aggregation over users, threads, emails and folders."""

__version__ = "0.1.0"

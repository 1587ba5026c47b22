"""Database errors propagate out of the repositories instead of turning into empty results."""

import unittest

from fixture_data import use_fresh_database
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from threadmail.db import get_session
from threadmail.db.repositories import (
    get_all_email_addresses,
    get_emails_for_thread,
    get_folders_with_thread_count,
    get_thread_in_folder,
    get_threads_for_folder,
    get_user_profile,
    search_threads,
)


class TestSubstrateFailure(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        use_fresh_database()
        with get_session() as session:
            session.execute(text("DROP TABLE thread_folders"))

    def test_folder_summary_raises(self):
        with self.assertRaises(OperationalError):
            get_folders_with_thread_count()

    def test_folder_listing_raises(self):
        with self.assertRaises(OperationalError):
            get_threads_for_folder("inbox")

    def test_thread_in_folder_raises(self):
        with self.assertRaises(OperationalError):
            get_thread_in_folder("inbox", "t1")

    def test_search_raises(self):
        # "quarterly" matches t1, so the folder lookup runs and hits the missing table
        with self.assertRaises(OperationalError):
            search_threads("quarterly")

    def test_empty_search_never_touches_database(self):
        self.assertEqual(search_threads(""), [])


class TestMissingEmailAndUserTables(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        use_fresh_database()
        with get_session() as session:
            session.execute(text("DROP TABLE emails"))
            session.execute(text("DROP TABLE users"))

    def test_thread_conversation_raises(self):
        with self.assertRaises(OperationalError):
            get_emails_for_thread("t1")

    def test_address_book_raises(self):
        with self.assertRaises(OperationalError):
            get_all_email_addresses()

    def test_user_profile_raises(self):
        with self.assertRaises(OperationalError):
            get_user_profile("u3")

"""Tests for folder thread listing, thread lookup within a folder, and thread detail."""

import unittest
from datetime import datetime

from fixture_data import use_fresh_database

from threadmail.db.repositories.thread_repo import (
    get_emails_for_thread,
    get_thread_in_folder,
    get_threads_for_folder,
)


class TestThreadsForFolder(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        use_fresh_database()

    def test_lowercase_folder_matches_canonical_name(self):
        threads = get_threads_for_folder("inbox")
        self.assertEqual([t.id for t in threads], ["t1", "t2", "t4"])

    def test_percent_encoded_multiword_folder(self):
        threads = get_threads_for_folder("project%20alpha")
        self.assertEqual([t.id for t in threads], ["t6"])

    def test_threads_newest_activity_first(self):
        threads = get_threads_for_folder("Inbox")
        dated = [t.last_activity_date for t in threads if t.last_activity_date is not None]
        self.assertEqual(dated, sorted(dated, reverse=True))
        self.assertEqual(threads[0].last_activity_date, datetime(2024, 2, 1, 9, 0))

    def test_emails_newest_first_with_sender(self):
        t1 = get_threads_for_folder("inbox")[0]
        self.assertEqual([e.id for e in t1.emails], ["e2", "e1"])
        self.assertEqual(t1.latest_email.id, "e2")
        sender = t1.emails[0].sender
        self.assertEqual((sender.id, sender.first_name, sender.last_name, sender.email), ("u2", "Grace", "Hopper", "grace@navy.example"))

    def test_thread_without_emails_has_empty_list(self):
        orphan = [t for t in get_threads_for_folder("inbox") if t.id == "t4"][0]
        self.assertEqual(orphan.emails, [])
        self.assertIsNone(orphan.latest_email)

    def test_same_sent_date_tie_broken_by_id(self):
        t9 = get_threads_for_folder("flagged")[0]
        self.assertEqual([e.id for e in t9.emails], ["e9a", "e9b"])
        self.assertIsNone(t9.emails[1].sender)

    def test_existing_folder_without_threads(self):
        self.assertEqual(get_threads_for_folder("receipts"), [])

    def test_unknown_folder(self):
        self.assertEqual(get_threads_for_folder("does-not-exist"), [])

    def test_malformed_folder_name_raises(self):
        with self.assertRaises(ValueError):
            get_threads_for_folder("%E0%A4%A")

    def test_idempotent(self):
        self.assertEqual(get_threads_for_folder("inbox"), get_threads_for_folder("inbox"))


class TestThreadInFolder(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        use_fresh_database()

    def test_member_thread_flattened_from_latest_email(self):
        thread = get_thread_in_folder("inbox", "t1")
        self.assertIsNotNone(thread)
        self.assertEqual(thread.id, "t1")
        self.assertEqual(thread.subject, "Quarterly report")
        self.assertEqual(thread.last_activity_date, datetime(2024, 2, 1, 9, 0))
        self.assertEqual(
            (thread.sender_first_name, thread.sender_last_name, thread.sender_email),
            ("Grace", "Hopper", "grace@navy.example"),
        )

    def test_thread_in_second_folder(self):
        self.assertIsNotNone(get_thread_in_folder("WORK", "t1"))

    def test_thread_from_other_folder_is_absent(self):
        self.assertIsNone(get_thread_in_folder("sent", "t1"))
        self.assertIsNotNone(get_thread_in_folder("sent", "t3"))

    def test_unfiled_thread_is_absent(self):
        self.assertIsNone(get_thread_in_folder("inbox", "t7"))

    def test_unknown_thread_or_folder_is_absent(self):
        self.assertIsNone(get_thread_in_folder("inbox", "missing"))
        self.assertIsNone(get_thread_in_folder("nowhere", "t1"))

    def test_thread_without_emails_has_no_sender(self):
        thread = get_thread_in_folder("inbox", "t4")
        self.assertIsNotNone(thread)
        self.assertIsNone(thread.sender_email)
        self.assertIsNone(thread.sender_first_name)

    def test_blank_thread_id_raises(self):
        with self.assertRaises(ValueError):
            get_thread_in_folder("inbox", "  ")


class TestEmailsForThread(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        use_fresh_database()

    def test_emails_oldest_first(self):
        conversation = get_emails_for_thread("t1")
        self.assertEqual(conversation.id, "t1")
        self.assertEqual(conversation.subject, "Quarterly report")
        self.assertEqual([e.id for e in conversation.emails], ["e1", "e2"])

    def test_order_is_inverse_of_folder_listing(self):
        listed = [t for t in get_threads_for_folder("inbox") if t.id == "t1"][0]
        conversation = get_emails_for_thread("t1")
        self.assertEqual([e.id for e in conversation.emails], [e.id for e in reversed(listed.emails)])

    def test_email_fields(self):
        first = get_emails_for_thread("t1").emails[0]
        self.assertEqual(first.body, "Draft attached for review")
        self.assertEqual(first.sent_date, datetime(2024, 1, 30, 9, 0))
        self.assertEqual(first.recipient_id, "u2")
        self.assertEqual((first.sender.id, first.sender.first_name, first.sender.last_name), ("u1", "Ada", "Lovelace"))

    def test_thread_without_emails(self):
        conversation = get_emails_for_thread("t4")
        self.assertIsNotNone(conversation)
        self.assertEqual(conversation.emails, [])

    def test_unknown_thread_is_absent(self):
        self.assertIsNone(get_emails_for_thread("missing"))

    def test_blank_thread_id_raises(self):
        with self.assertRaises(ValueError):
            get_emails_for_thread("")

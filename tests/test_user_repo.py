"""Tests for the address book and user profiles."""

import unittest

from fixture_data import use_fresh_database

from threadmail.db.repositories.user_repo import get_all_email_addresses, get_user_profile


class TestAddressBook(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        use_fresh_database()

    def test_every_user_listed(self):
        entries = get_all_email_addresses()
        self.assertEqual(
            [e.email for e in entries],
            ["ada@example.com", "grace@navy.example", "linus@example.org", "nobody@example.net"],
        )
        self.assertEqual((entries[0].first_name, entries[0].last_name), ("Ada", "Lovelace"))


class TestUserProfile(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        use_fresh_database()

    def test_profile_fields(self):
        profile = get_user_profile("u3")
        self.assertEqual(profile.email, "linus@example.org")
        self.assertEqual(profile.job_title, "Maintainer")
        self.assertEqual(profile.company, "Kernel Co")
        self.assertEqual(profile.location, "Helsinki")
        self.assertEqual(profile.github, "https://github.com/lquill")
        self.assertIsNone(profile.twitter)

    def test_three_most_recent_authored_threads(self):
        profile = get_user_profile("u3")
        self.assertEqual([t.subject for t in profile.latest_threads], ["Retro", "Kickoff", "Conference travel"])

    def test_only_threads_with_user_as_sender(self):
        # Grace received in t3 but only sent in t1 and t2
        profile = get_user_profile("u2")
        self.assertEqual([t.subject for t in profile.latest_threads], ["Quarterly report", "Lunch plans"])

    def test_user_without_threads_has_empty_list(self):
        profile = get_user_profile("u4")
        self.assertIsNotNone(profile)
        self.assertEqual(profile.latest_threads, [])

    def test_unknown_user_is_absent(self):
        self.assertIsNone(get_user_profile("missing"))

    def test_blank_user_id_raises(self):
        with self.assertRaises(ValueError):
            get_user_profile(" ")

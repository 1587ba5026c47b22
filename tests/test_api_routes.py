"""Tests for the mailbox HTTP API: shapes, camelCase aliases, 400/404 mapping."""

import unittest

from fastapi.testclient import TestClient
from fixture_data import use_fresh_database

from threadmail.api import create_app


class TestMailboxRoutes(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        use_fresh_database()
        cls.client = TestClient(create_app())

    def test_health(self):
        r = self.client.get("/health")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"status": "ok"})

    def test_folders(self):
        r = self.client.get("/api/folders")
        self.assertEqual(r.status_code, 200)
        data = r.json()
        self.assertEqual([f["name"] for f in data["specialFolders"]], ["Inbox", "Flagged", "Sent"])
        self.assertEqual(data["specialFolders"][0]["threadCount"], 3)
        self.assertIn("otherFolders", data)

    def test_folder_threads(self):
        r = self.client.get("/api/folders/inbox/threads")
        self.assertEqual(r.status_code, 200)
        data = r.json()
        self.assertEqual([t["id"] for t in data], ["t1", "t2", "t4"])
        self.assertEqual(data[0]["emails"][0]["sender"]["lastName"], "Hopper")
        self.assertEqual(data[2]["emails"], [])

    def test_folder_threads_unknown_folder(self):
        r = self.client.get("/api/folders/nowhere/threads")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), [])

    def test_thread_in_folder(self):
        r = self.client.get("/api/folders/inbox/threads/t1")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["senderEmail"], "grace@navy.example")

    def test_thread_in_other_folder_is_404(self):
        r = self.client.get("/api/folders/sent/threads/t1")
        self.assertEqual(r.status_code, 404)

    def test_thread_detail(self):
        r = self.client.get("/api/threads/t1")
        self.assertEqual(r.status_code, 200)
        data = r.json()
        self.assertEqual([e["id"] for e in data["emails"]], ["e1", "e2"])
        self.assertEqual(data["emails"][0]["recipientId"], "u2")

    def test_thread_detail_missing(self):
        self.assertEqual(self.client.get("/api/threads/missing").status_code, 404)

    def test_search(self):
        r = self.client.get("/api/search", params={"q": "hopper"})
        self.assertEqual(r.status_code, 200)
        data = r.json()
        self.assertEqual([x["id"] for x in data], ["t1", "t2"])
        self.assertEqual(data[0]["folderName"], "Work")
        self.assertEqual(data[0]["latestEmail"]["sender"]["firstName"], "Grace")

    def test_search_without_query(self):
        r = self.client.get("/api/search")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), [])

    def test_users(self):
        r = self.client.get("/api/users")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(len(r.json()), 4)

    def test_user_profile(self):
        r = self.client.get("/api/users/u3")
        self.assertEqual(r.status_code, 200)
        data = r.json()
        self.assertEqual(data["jobTitle"], "Maintainer")
        self.assertEqual(len(data["latestThreads"]), 3)

    def test_user_profile_missing(self):
        self.assertEqual(self.client.get("/api/users/missing").status_code, 404)

    def test_blank_user_id_is_400(self):
        self.assertEqual(self.client.get("/api/users/%20").status_code, 400)

    def test_encoded_folder_decoded_once(self):
        r = self.client.get("/api/folders/project%20alpha/threads")
        self.assertEqual([t["id"] for t in r.json()], ["t6"])
        r = self.client.get("/api/folders/Project%2520Alpha/threads")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), [])
        self.assertEqual(self.client.get("/api/folders/Project%2520Alpha/threads/t6").status_code, 404)

    def test_padded_user_id_is_400(self):
        self.assertEqual(self.client.get("/api/users/%20u3").status_code, 400)

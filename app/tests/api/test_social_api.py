import unittest

from fastapi.testclient import TestClient

from app.main import app
from app.tests.helpers import auth_headers, make_character, make_friends, make_user
from app.models import Visibility


class UserApiTests(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)
        make_user("u1", username="alice")
        make_user("u2", username="bob")

    def test_public_profile(self):
        response = self.client.get("/v1/users/alice")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["user_id"], "u1")
        self.assertNotIn("email", body)
        self.assertEqual(body["verifications"], [])

        self.assertEqual(self.client.get("/v1/users/nobody").status_code, 404)

    def test_user_characters_respect_viewer(self):
        make_character("u1", "Open")
        make_character("u1", "Hidden", visibility=Visibility.private)

        anonymous = self.client.get("/v1/users/u1/characters").json()
        own = self.client.get("/v1/users/u1/characters", headers=auth_headers("u1")).json()

        self.assertEqual([c["name"] for c in anonymous], ["Open"])
        self.assertEqual(len(own), 2)

    def test_follow_toggle_and_status(self):
        url = "/v1/users/u2/follow"

        self.assertEqual(self.client.post(url, headers=auth_headers("u1")).json(), {"following": True})
        status = self.client.get("/v1/users/u2/follow-status", headers=auth_headers("u1"))
        self.assertEqual(status.json(), {"following": True})

        followers = self.client.get("/v1/users/u2/followers").json()
        self.assertEqual(followers["total"], 1)
        self.assertEqual(followers["users"][0]["user_id"], "u1")

        self.assertEqual(self.client.post(url, headers=auth_headers("u1")).json(), {"following": False})

    def test_self_follow_is_400(self):
        response = self.client.post("/v1/users/u1/follow", headers=auth_headers("u1"))

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "Cannot follow yourself"})

    def test_friend_request_flow(self):
        sent = self.client.post("/v1/users/u2/friend-request", headers=auth_headers("u1"))
        self.assertEqual(sent.json()["status"], "pending")

        requests = self.client.get("/v1/users/me/friend-requests", headers=auth_headers("u2"))
        self.assertEqual([r["requester"]["username"] for r in requests.json()], ["alice"])

        accepted = self.client.post("/v1/friend-requests/u1/accept", headers=auth_headers("u2"))
        self.assertEqual(accepted.json()["status"], "accepted")

        friends = self.client.get("/v1/users/me/friends", headers=auth_headers("u1"))
        self.assertEqual([f["user_id"] for f in friends.json()], ["u2"])

        again = self.client.post("/v1/friend-requests/u1/reject", headers=auth_headers("u2"))
        self.assertEqual(again.status_code, 400)

        missing = self.client.post("/v1/friend-requests/u2/accept", headers=auth_headers("u1"))
        self.assertEqual(missing.status_code, 404)

        removed = self.client.delete("/v1/users/u1/friend", headers=auth_headers("u2"))
        self.assertTrue(removed.json()["success"])

    def test_block_cuts_ties_and_blocks_new_ones(self):
        make_friends("u1", "u2")
        self.client.post("/v1/users/u2/follow", headers=auth_headers("u1"))

        blocked = self.client.post("/v1/users/u1/block", headers=auth_headers("u2"))
        self.assertEqual(blocked.status_code, 200)

        friends = self.client.get("/v1/users/me/friends", headers=auth_headers("u1"))
        self.assertEqual(friends.json(), [])
        status = self.client.get("/v1/users/u2/follow-status", headers=auth_headers("u1"))
        self.assertEqual(status.json(), {"following": False})

        follow = self.client.post("/v1/users/u2/follow", headers=auth_headers("u1"))
        self.assertEqual(follow.status_code, 403)
        request = self.client.post("/v1/users/u2/friend-request", headers=auth_headers("u1"))
        self.assertEqual(request.status_code, 403)

        listed = self.client.get("/v1/users/me/blocked", headers=auth_headers("u2"))
        self.assertEqual([u["user_id"] for u in listed.json()], ["u1"])

        self.client.post("/v1/users/u1/unblock", headers=auth_headers("u2"))
        follow = self.client.post("/v1/users/u2/follow", headers=auth_headers("u1"))
        self.assertEqual(follow.json(), {"following": True})

    def test_settings(self):
        theme = self.client.patch(
            "/v1/user/theme", json={"theme": "midnight"}, headers=auth_headers("u1")
        )
        self.assertEqual(theme.status_code, 200)

        bad_theme = self.client.patch(
            "/v1/user/theme", json={"theme": "rainbow"}, headers=auth_headers("u1")
        )
        self.assertEqual(bad_theme.status_code, 400)

        visibility = self.client.patch(
            "/v1/user/profile-visibility",
            json={"visibility": "private"},
            headers=auth_headers("u1"),
        )
        self.assertEqual(visibility.status_code, 200)

        me = self.client.get("/v1/auth/user", headers=auth_headers("u1")).json()
        self.assertEqual(me["theme"], "midnight")
        self.assertEqual(me["profile_visibility"], "private")


class MessageApiTests(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)
        make_user("u1")
        make_user("u2")
        make_user("u3")
        make_friends("u1", "u2")

    def test_friends_can_talk(self):
        self.client.post(
            "/v1/messages", json={"receiver_id": "u2", "content": "hi"}, headers=auth_headers("u1")
        )
        self.client.post(
            "/v1/messages", json={"receiver_id": "u1", "content": "hey"}, headers=auth_headers("u2")
        )

        conversation = self.client.get("/v1/messages/u1", headers=auth_headers("u2"))

        self.assertEqual([m["content"] for m in conversation.json()], ["hi", "hey"])

    def test_strangers_are_refused(self):
        response = self.client.post(
            "/v1/messages", json={"receiver_id": "u3", "content": "hi"}, headers=auth_headers("u1")
        )

        self.assertEqual(response.status_code, 403)
        self.assertEqual(self.client.get("/v1/messages/u3", headers=auth_headers("u1")).status_code, 403)

    def test_empty_or_long_content_is_400(self):
        empty = self.client.post(
            "/v1/messages", json={"receiver_id": "u2", "content": ""}, headers=auth_headers("u1")
        )
        long = self.client.post(
            "/v1/messages",
            json={"receiver_id": "u2", "content": "x" * 2001},
            headers=auth_headers("u1"),
        )

        self.assertEqual(empty.status_code, 400)
        self.assertEqual(long.status_code, 400)

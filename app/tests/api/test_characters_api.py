import unittest

from fastapi.testclient import TestClient

from app.main import app
from app.models import Visibility
from app.tests.helpers import auth_headers, get_character, make_character, make_user


class CharacterApiTests(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)
        make_user("u1", username="alice")
        make_user("u2", username="bob")

    def test_create_requires_login(self):
        response = self.client.post("/v1/characters", json={"name": "Lyra"})

        self.assertEqual(response.status_code, 401)
        self.assertIn("message", response.json())

    def test_lyra_scenario(self):
        created = self.client.post(
            "/v1/characters",
            json={"name": "Lyra", "tags": ["Fantasy"]},
            headers=auth_headers("u1"),
        )
        self.assertEqual(created.status_code, 200)
        lyra = created.json()
        self.assertEqual(lyra["tags"], ["OC", "Fantasy"])
        self.assertEqual(lyra["creator_id"], "u1")

        like_url = f"/v1/characters/{lyra['character_id']}/like"
        first = self.client.post(like_url, headers=auth_headers("u2"))
        self.assertEqual(first.json(), {"liked": True})
        self.assertEqual(get_character(lyra["character_id"]).likes_count, 1)

        status = self.client.get(
            f"/v1/characters/{lyra['character_id']}/status", headers=auth_headers("u2")
        )
        self.assertEqual(status.json(), {"liked": True, "favorited": False})

        second = self.client.post(like_url, headers=auth_headers("u2"))
        self.assertEqual(second.json(), {"liked": False})
        self.assertEqual(get_character(lyra["character_id"]).likes_count, 0)

    def test_malformed_id_is_a_400_with_message(self):
        response = self.client.get("/v1/characters/not-a-number")

        self.assertEqual(response.status_code, 400)
        self.assertIn("message", response.json())

    def test_unknown_character_is_404(self):
        response = self.client.get("/v1/characters/4242")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"message": "Character not found"})

    def test_patch_by_non_owner_is_403_and_owner_update_keeps_oc(self):
        character_id = make_character("u1", "Lyra", tags=["OC", "Fantasy"])

        forbidden = self.client.patch(
            f"/v1/characters/{character_id}", json={"name": "Mine"}, headers=auth_headers("u2")
        )
        self.assertEqual(forbidden.status_code, 403)

        updated = self.client.patch(
            f"/v1/characters/{character_id}", json={"tags": ["Hero"]}, headers=auth_headers("u1")
        )
        self.assertEqual(updated.status_code, 200)
        self.assertEqual(updated.json()["tags"], ["OC", "Hero"])

    def test_delete(self):
        character_id = make_character("u1", "Lyra")

        response = self.client.delete(f"/v1/characters/{character_id}", headers=auth_headers("u1"))

        self.assertEqual(response.json(), {"success": True, "message": None})
        self.assertEqual(self.client.get(f"/v1/characters/{character_id}").status_code, 404)

    def test_private_character_detail_is_owner_only(self):
        character_id = make_character("u1", "Hidden", visibility=Visibility.private)

        self.assertEqual(self.client.get(f"/v1/characters/{character_id}").status_code, 404)
        self.assertEqual(
            self.client.get(
                f"/v1/characters/{character_id}", headers=auth_headers("u2")
            ).status_code,
            404,
        )
        own = self.client.get(f"/v1/characters/{character_id}", headers=auth_headers("u1"))
        self.assertEqual(own.json()["creator"]["username"], "alice")

    def test_viewing_fills_recently_viewed(self):
        character_id = make_character("u1", "Lyra")

        self.client.get(f"/v1/characters/{character_id}", headers=auth_headers("u2"))
        recent = self.client.get("/v1/characters/recently-viewed", headers=auth_headers("u2"))

        self.assertEqual([c["character_id"] for c in recent.json()], [character_id])

    def test_discovery_modes(self):
        make_character("u1", "Popular", tags=["OC", "Anime"], likes_count=10)
        make_character("u1", "Fresh", tags=["OC", "Horror"], likes_count=1)

        featured = self.client.get("/v1/characters", params={"type": "featured"}).json()
        self.assertEqual([c["name"] for c in featured], ["Popular", "Fresh"])

        newest = self.client.get("/v1/characters", params={"limit": 1}).json()
        self.assertEqual([c["name"] for c in newest], ["Fresh"])

        tagged = self.client.get("/v1/characters", params={"tags": "Horror, Sci-Fi"}).json()
        self.assertEqual([c["name"] for c in tagged], ["Fresh"])

        searched = self.client.get("/v1/characters", params={"query": "popu"}).json()
        self.assertEqual([c["name"] for c in searched], ["Popular"])

    def test_following_feed(self):
        make_character("u2", "Bob's")
        self.client.post("/v1/users/u2/follow", headers=auth_headers("u1"))

        feed = self.client.get("/v1/characters/following/feed", headers=auth_headers("u1"))

        self.assertEqual([c["name"] for c in feed.json()], ["Bob's"])

    def test_favorites_show_up_under_me(self):
        character_id = make_character("u1", "Lyra")

        toggled = self.client.post(
            f"/v1/characters/{character_id}/favorite", headers=auth_headers("u2")
        )
        favorites = self.client.get("/v1/users/me/favorites", headers=auth_headers("u2"))

        self.assertEqual(toggled.json(), {"favorited": True})
        self.assertEqual([c["character_id"] for c in favorites.json()], [character_id])

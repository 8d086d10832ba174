import unittest

from app.core.tags import PREDEFINED_TAGS, is_valid_tag, normalize_tags
from app.models import Visibility
from app.services.tag_service import TagService
from app.tests.helpers import make_character, make_user


class TagServiceTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.service = TagService()
        make_user("u1")
        make_character("u1", "A", tags=["OC", "Fantasy", "Cute"])
        make_character("u1", "B", tags=["OC", "Fantasy", "Spooky"])
        make_character("u1", "C", tags=["OC", "Cute"])
        make_character("u1", "Hidden", tags=["OC", "Secret"], visibility=Visibility.private)

    async def test_trending_counts_public_characters_only(self):
        trending = await self.service.get_trending_tags()

        self.assertEqual(
            [(t.tag, t.count) for t in trending],
            [("OC", 3), ("Cute", 2), ("Fantasy", 2), ("Spooky", 1)],
        )

    async def test_trending_respects_limit(self):
        trending = await self.service.get_trending_tags(limit=2)

        self.assertEqual([t.tag for t in trending], ["OC", "Cute"])

    async def test_repeated_tag_counts_once_per_character(self):
        make_character("u1", "D", tags=["OC", "Spooky", "Spooky"])

        trending = await self.service.get_trending_tags()

        self.assertEqual(
            [(t.tag, t.count) for t in trending],
            [("OC", 4), ("Cute", 2), ("Fantasy", 2), ("Spooky", 2)],
        )

    async def test_available_tags_put_predefined_first_without_duplicates(self):
        tags = await self.service.get_available_tags()

        self.assertEqual(tags[: len(PREDEFINED_TAGS)], PREDEFINED_TAGS)
        self.assertEqual(tags[len(PREDEFINED_TAGS):], ["Spooky"])
        self.assertNotIn("Secret", tags)


class TagHelperTests(unittest.TestCase):
    def test_normalize_tags(self):
        self.assertEqual(normalize_tags([]), ["OC"])
        self.assertEqual(normalize_tags(None), ["OC"])
        self.assertEqual(normalize_tags(["Hero", "Hero", " Villain "]), ["OC", "Hero", "Villain"])

    def test_is_valid_tag(self):
        self.assertTrue(is_valid_tag("Anti-Hero"))
        self.assertFalse(is_valid_tag("anti-hero"))

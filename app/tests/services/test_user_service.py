import unittest

from app.core.exceptions import NotFoundError, ValidationError
from app.models import Visibility
from app.schemas.user import UserUpsert
from app.services.user_service import UserService
from app.services.verification_service import VerificationService
from app.tests.helpers import make_user


class UserServiceTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.service = UserService()

    async def test_upsert_creates_then_refreshes_identity(self):
        created = await self.service.upsert_user(
            UserUpsert(user_id="g-1", email="a@example.com", first_name="Ann")
        )
        self.assertEqual(created.theme, "black")
        self.assertFalse(created.is_creator)

        await self.service.update_theme("g-1", "neon")
        refreshed = await self.service.upsert_user(
            UserUpsert(user_id="g-1", email="a@example.com", first_name="Anna")
        )

        self.assertEqual(refreshed.first_name, "Anna")
        self.assertEqual(refreshed.theme, "neon")

    async def test_theme_must_be_known(self):
        make_user("u1")

        with self.assertRaises(ValidationError):
            await self.service.update_theme("u1", "rainbow")
        with self.assertRaises(NotFoundError):
            await self.service.update_theme("ghost", "white")

    async def test_profile_visibility_is_upserted(self):
        make_user("u1", username="alice")

        await self.service.update_profile_visibility("u1", Visibility.private)
        await self.service.update_profile_visibility("u1", "restricted")
        profile = await self.service.get_user_by_username("alice")

        self.assertEqual(profile.profile_visibility, Visibility.restricted)
        with self.assertRaises(ValidationError):
            await self.service.update_profile_visibility("u1", "secret")

    async def test_profile_by_username_includes_verifications(self):
        make_user("u1", username="alice")
        await VerificationService().add_verification("u1", "Instagram", "alice.draws")

        profile = await self.service.get_user_by_username("alice")

        self.assertEqual(profile.user_id, "u1")
        self.assertEqual(profile.profile_visibility, Visibility.public)
        self.assertEqual([v.platform for v in profile.verifications], ["instagram"])
        self.assertIsNone(await self.service.get_user_by_username("nobody"))


class VerificationServiceTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.service = VerificationService()
        make_user("u1")

    async def test_changing_the_claimed_username_resets_verification(self):
        await self.service.add_verification("u1", "x", "lyra")
        verified = await self.service.verify_social_media("u1", "x")
        self.assertTrue(verified.is_verified)

        same = await self.service.add_verification("u1", "x", "lyra")
        self.assertTrue(same.is_verified)

        changed = await self.service.add_verification("u1", "x", "lyra_new")
        self.assertFalse(changed.is_verified)
        self.assertEqual(len(await self.service.get_user_verifications("u1")), 1)

    async def test_unknown_platform_and_missing_claim(self):
        with self.assertRaises(ValidationError):
            await self.service.add_verification("u1", "myspace", "lyra")
        with self.assertRaises(NotFoundError):
            await self.service.verify_social_media("u1", "tiktok")

    async def test_platform_is_matched_case_insensitively(self):
        await self.service.add_verification("u1", "YouTube", "lyra")

        verified = await self.service.verify_social_media("u1", " YOUTUBE ")

        self.assertEqual(verified.platform, "youtube")
        self.assertTrue(verified.is_verified)

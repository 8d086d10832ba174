import unittest

from app.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from app.models import FriendshipStatus
from app.services.block_service import BlockService
from app.services.friendship_service import FriendshipService
from app.services.user_follow_service import UserFollowService
from app.tests.helpers import make_follow, make_friends, make_user


class FollowServiceTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.service = UserFollowService()
        make_user("u1", username="alice")
        make_user("u2", username="bob", is_creator=True)
        make_user("u3", username="carol")

    async def test_toggle_follow_twice_returns_to_not_following(self):
        self.assertTrue(await self.service.toggle_follow("u1", "u2"))
        self.assertTrue(await self.service.is_following("u1", "u2"))

        self.assertFalse(await self.service.toggle_follow("u1", "u2"))
        self.assertFalse(await self.service.is_following("u1", "u2"))

    async def test_follow_rejects_self_unknown_and_blocked(self):
        with self.assertRaises(ValidationError):
            await self.service.toggle_follow("u1", "u1")
        with self.assertRaises(NotFoundError):
            await self.service.toggle_follow("u1", "ghost")

        await BlockService().block_user("u2", "u1")
        with self.assertRaises(ForbiddenError):
            await self.service.toggle_follow("u1", "u2")

    async def test_follower_lists_mark_who_the_viewer_follows(self):
        make_follow("u1", "u2")
        make_follow("u3", "u2")
        make_follow("u1", "u3")

        followers = await self.service.get_followers("u2", current_user_id="u1")

        self.assertEqual(followers.total, 2)
        flags = {u.user_id: u.is_following for u in followers.users}
        self.assertEqual(flags, {"u1": False, "u3": True})

        following = await self.service.get_following("u1")
        self.assertEqual(following.total, 2)
        self.assertEqual({u.user_id for u in following.users}, {"u2", "u3"})


class FriendshipServiceTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.service = FriendshipService()
        make_user("u1")
        make_user("u2")

    async def test_request_then_accept_makes_friends_both_ways(self):
        request = await self.service.send_friend_request("u1", "u2")
        self.assertEqual(request.status, FriendshipStatus.pending)
        self.assertFalse(await self.service.are_friends("u1", "u2"))

        pending = await self.service.get_friend_requests("u2")
        self.assertEqual([r.requester.user_id for r in pending], ["u1"])

        accepted = await self.service.accept_friend_request("u1", "u2")
        self.assertEqual(accepted.status, FriendshipStatus.accepted)
        self.assertTrue(await self.service.are_friends("u1", "u2"))
        self.assertTrue(await self.service.are_friends("u2", "u1"))
        self.assertEqual([u.user_id for u in await self.service.get_friends("u2")], ["u1"])
        self.assertEqual(await self.service.get_friend_requests("u2"), [])

    async def test_friend_listed_once_when_both_orderings_are_accepted(self):
        make_friends("u1", "u2")
        make_friends("u2", "u1")

        self.assertEqual([u.user_id for u in await self.service.get_friends("u1")], ["u2"])
        self.assertEqual([u.user_id for u in await self.service.get_friends("u2")], ["u1"])

    async def test_accept_is_keyed_by_requester_and_addressee(self):
        await self.service.send_friend_request("u1", "u2")

        with self.assertRaises(NotFoundError):
            await self.service.accept_friend_request("u2", "u1")

    async def test_answered_request_cannot_be_answered_again(self):
        await self.service.send_friend_request("u1", "u2")
        await self.service.reject_friend_request("u1", "u2")

        with self.assertRaises(ValidationError):
            await self.service.accept_friend_request("u1", "u2")

    async def test_resending_a_rejected_request_changes_nothing(self):
        await self.service.send_friend_request("u1", "u2")
        await self.service.reject_friend_request("u1", "u2")

        again = await self.service.send_friend_request("u1", "u2")

        self.assertEqual(again.status, FriendshipStatus.rejected)
        self.assertEqual(await self.service.get_friend_requests("u2"), [])

    async def test_request_rejects_self_unknown_and_blocked(self):
        with self.assertRaises(ValidationError):
            await self.service.send_friend_request("u1", "u1")
        with self.assertRaises(NotFoundError):
            await self.service.send_friend_request("u1", "ghost")

        await BlockService().block_user("u1", "u2")
        with self.assertRaises(ForbiddenError):
            await self.service.send_friend_request("u2", "u1")

    async def test_remove_friend_works_from_either_side(self):
        make_friends("u1", "u2")

        self.assertTrue(await self.service.remove_friend("u2", "u1"))
        self.assertFalse(await self.service.are_friends("u1", "u2"))
        self.assertFalse(await self.service.remove_friend("u2", "u1"))


class BlockServiceTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.service = BlockService()
        make_user("u1")
        make_user("u2")

    async def test_block_removes_friendship_and_follows_both_ways(self):
        make_friends("u2", "u1")
        make_follow("u1", "u2")
        make_follow("u2", "u1")

        await self.service.block_user("u2", "u1")

        friendships = FriendshipService()
        follows = UserFollowService()
        self.assertFalse(await friendships.are_friends("u1", "u2"))
        self.assertFalse(await follows.is_following("u1", "u2"))
        self.assertFalse(await follows.is_following("u2", "u1"))

    async def test_block_is_symmetric_for_checks_and_idempotent(self):
        await self.service.block_user("u1", "u2")
        await self.service.block_user("u1", "u2")

        self.assertTrue(await self.service.is_blocked("u2", "u1"))
        self.assertEqual([u.user_id for u in await self.service.get_blocked_users("u1")], ["u2"])
        self.assertEqual(await self.service.get_blocked_users("u2"), [])

    async def test_unblock(self):
        await self.service.block_user("u1", "u2")

        self.assertTrue(await self.service.unblock_user("u1", "u2"))
        self.assertFalse(await self.service.is_blocked("u1", "u2"))
        self.assertFalse(await self.service.unblock_user("u1", "u2"))

    async def test_block_rejects_self_and_unknown(self):
        with self.assertRaises(ValidationError):
            await self.service.block_user("u1", "u1")
        with self.assertRaises(NotFoundError):
            await self.service.block_user("u1", "ghost")

import unittest

from app.core.exceptions import ForbiddenError, ValidationError
from app.services.block_service import BlockService
from app.services.friendship_service import FriendshipService
from app.services.message_service import MessageService
from app.tests.helpers import make_friends, make_user


class MessageServiceTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.service = MessageService()
        make_user("u1")
        make_user("u2")
        make_user("u3")
        make_friends("u1", "u2")

    async def test_non_friends_cannot_message(self):
        with self.assertRaises(ForbiddenError):
            await self.service.send_message("u1", "u3", "hi")
        with self.assertRaises(ForbiddenError):
            await self.service.get_conversation("u1", "u3")

    async def test_pending_request_is_not_enough(self):
        await FriendshipService().send_friend_request("u1", "u3")

        with self.assertRaises(ForbiddenError):
            await self.service.send_message("u1", "u3", "hi")

    async def test_conversation_is_oldest_first_in_both_directions(self):
        await self.service.send_message("u1", "u2", "first")
        await self.service.send_message("u2", "u1", "second")
        await self.service.send_message("u1", "u2", "third")

        conversation = await self.service.get_conversation("u2", "u1")

        self.assertEqual([m.content for m in conversation], ["first", "second", "third"])
        self.assertEqual(conversation[1].sender_id, "u2")

    async def test_reading_marks_incoming_messages_only(self):
        await self.service.send_message("u1", "u2", "to u2")
        await self.service.send_message("u2", "u1", "to u1")

        await self.service.get_conversation("u2", "u1")
        after = await self.service.get_conversation("u2", "u1")

        read = {m.content: m.is_read for m in after}
        self.assertTrue(read["to u2"])
        self.assertFalse(read["to u1"])

    async def test_mark_messages_as_read_counts_updates(self):
        await self.service.send_message("u1", "u2", "a")
        await self.service.send_message("u1", "u2", "b")

        self.assertEqual(await self.service.mark_messages_as_read("u2", "u1"), 2)
        self.assertEqual(await self.service.mark_messages_as_read("u2", "u1"), 0)

    async def test_block_stops_messaging(self):
        await self.service.send_message("u1", "u2", "before")
        await BlockService().block_user("u2", "u1")

        with self.assertRaises(ForbiddenError):
            await self.service.send_message("u1", "u2", "after")
        with self.assertRaises(ForbiddenError):
            await self.service.get_conversation("u2", "u1")

    async def test_content_length_is_validated(self):
        with self.assertRaises(ValidationError):
            await self.service.send_message("u1", "u2", "   ")
        with self.assertRaises(ValidationError):
            await self.service.send_message("u1", "u2", "x" * 2001)

        message = await self.service.send_message("u1", "u2", "x" * 2000)
        self.assertEqual(len(message.content), 2000)

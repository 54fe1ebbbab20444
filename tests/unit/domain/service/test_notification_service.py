"""Unit tests for NotificationService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from agora.domain.error import NotFoundError
from agora.domain.model import Notification
from agora.domain.model.common import utcnow
from agora.domain.repository import (
    NotificationRepository,
    PostRepository,
    TransactionScope,
    UserRepository,
)
from agora.domain.service import NotificationService
from agora.domain.value import NotificationId, NotificationKind, UserId
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed(env):
    """Save an author, an actor and a post by the author."""
    user_repo = await env.get(UserRepository)
    post_repo = await env.get(PostRepository)
    author = await user_repo.save(make_user("author"))
    actor = await user_repo.save(make_user("actor"))
    post = await post_repo.save(make_post(author, title="Hello"))
    return author, actor, post


class TestNotifyIfNew:
    """De-duplication and self-suppression."""

    @pytest.mark.asyncio
    async def test_creates_notification(self, unit_env):
        service = await unit_env.get(NotificationService)
        author, actor, post = await seed(unit_env)

        notification = await service.notify_if_new(
            recipient_id=author.id,
            kind=NotificationKind.UPVOTE,
            actor_id=actor.id,
            post_id=post.id,
            post_title=post.title,
        )

        assert notification is not None
        assert notification.recipient_id == author.id
        assert notification.actor_handle.root == "actor"
        assert notification.is_read is False

    @pytest.mark.asyncio
    async def test_self_notification_is_skipped(self, unit_env):
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        author, _, post = await seed(unit_env)

        result = await service.notify_if_new(
            recipient_id=author.id,
            kind=NotificationKind.UPVOTE,
            actor_id=author.id,
            post_id=post.id,
        )

        assert result is None
        assert await repo.count_by_recipient(author.id) == 0

    @pytest.mark.asyncio
    async def test_duplicate_within_window_is_skipped(self, unit_env):
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        author, actor, post = await seed(unit_env)
        kwargs = dict(
            recipient_id=author.id,
            kind=NotificationKind.UPVOTE,
            actor_id=actor.id,
            post_id=post.id,
        )

        first = await service.notify_if_new(**kwargs)
        second = await service.notify_if_new(**kwargs)

        assert first is not None
        assert second is None
        assert await repo.count_by_recipient(author.id) == 1

    @pytest.mark.asyncio
    async def test_check_and_insert_share_one_savepoint(self, unit_env):
        service = await unit_env.get(NotificationService)
        scope = await unit_env.get(TransactionScope)
        author, actor, post = await seed(unit_env)
        kwargs = dict(
            recipient_id=author.id,
            kind=NotificationKind.UPVOTE,
            actor_id=actor.id,
            post_id=post.id,
        )

        await service.notify_if_new(**kwargs)
        await service.notify_if_new(**kwargs)
        await service.notify_if_new(**{**kwargs, "actor_id": UserId(uuid4())})

        # Created, suppressed, then unknown actor rolled back
        assert scope.committed == 2
        assert scope.rolled_back == 1

    @pytest.mark.asyncio
    async def test_old_notification_does_not_suppress(self, unit_env):
        """Events outside the window notify again."""
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        author, actor, post = await seed(unit_env)
        await repo.save(
            Notification(
                id=NotificationId(uuid4()),
                recipient_id=author.id,
                kind=NotificationKind.UPVOTE,
                actor_id=actor.id,
                actor_handle=actor.handle,
                post_id=post.id,
                message="actor upvoted your post",
                created_at=utcnow() - timedelta(hours=25),
            )
        )

        result = await service.notify_if_new(
            recipient_id=author.id,
            kind=NotificationKind.UPVOTE,
            actor_id=actor.id,
            post_id=post.id,
        )

        assert result is not None
        assert await repo.count_by_recipient(author.id) == 2

    @pytest.mark.asyncio
    async def test_different_comment_is_not_a_duplicate(self, unit_env):
        service = await unit_env.get(NotificationService)
        author, actor, post = await seed(unit_env)
        first = make_comment(author, post)
        second = make_comment(author, post)

        for comment in (first, second):
            result = await service.notify_if_new(
                recipient_id=author.id,
                kind=NotificationKind.UPVOTE,
                actor_id=actor.id,
                post_id=post.id,
                comment_id=comment.id,
            )
            assert result is not None

    @pytest.mark.asyncio
    async def test_excerpt_is_truncated(self, unit_env):
        service = await unit_env.get(NotificationService)
        author, actor, post = await seed(unit_env)

        notification = await service.notify_if_new(
            recipient_id=author.id,
            kind=NotificationKind.POST_REPLY,
            actor_id=actor.id,
            post_id=post.id,
            comment_text="a" * 250,
        )

        assert notification.comment_excerpt == "a" * 200


class TestNotifyReply:
    """Reply notifications target the post or parent author."""

    @pytest.mark.asyncio
    async def test_top_level_comment_notifies_post_author(self, unit_env):
        service = await unit_env.get(NotificationService)
        author, actor, post = await seed(unit_env)
        comment = make_comment(actor, post, text="First!")

        notification = await service.notify_reply(comment, post)

        assert notification.recipient_id == author.id
        assert notification.kind is NotificationKind.POST_REPLY
        assert notification.comment_excerpt == "First!"
        assert notification.post_title == "Hello"
        assert notification.message == "actor commented on your post"

    @pytest.mark.asyncio
    async def test_reply_notifies_parent_author(self, unit_env):
        service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        author, actor, post = await seed(unit_env)
        parent_author = await user_repo.save(make_user("parent"))
        parent = make_comment(parent_author, post)
        reply = make_comment(actor, post, parent=parent)

        notification = await service.notify_reply(reply, post, parent)

        assert notification.recipient_id == parent_author.id
        assert notification.kind is NotificationKind.COMMENT_REPLY
        assert notification.message == "actor replied to your comment"

    @pytest.mark.asyncio
    async def test_reply_to_own_comment_is_silent(self, unit_env):
        service = await unit_env.get(NotificationService)
        _, actor, post = await seed(unit_env)
        parent = make_comment(actor, post)
        reply = make_comment(actor, post, parent=parent)

        assert await service.notify_reply(reply, post, parent) is None


class TestInbox:
    """Listing and managing a user's notifications."""

    async def _fill(self, env, count: int):
        service = await env.get(NotificationService)
        user_repo = await env.get(UserRepository)
        author, _, post = await seed(env)
        for i in range(count):
            actor = await user_repo.save(make_user(f"actor{i}"))
            await service.notify_if_new(
                recipient_id=author.id,
                kind=NotificationKind.UPVOTE,
                actor_id=actor.id,
                post_id=post.id,
            )
        return service, author

    @pytest.mark.asyncio
    async def test_list_and_count(self, unit_env):
        service, author = await self._fill(unit_env, 3)

        notifications, total = await service.list_for_recipient(author.id, limit=2)

        assert total == 3
        assert len(notifications) == 2
        assert notifications[0].created_at >= notifications[1].created_at
        assert await service.count_unread(author.id) == 3

    @pytest.mark.asyncio
    async def test_kind_filter(self, unit_env):
        service, author = await self._fill(unit_env, 2)

        _, upvotes = await service.list_for_recipient(
            author.id, kind=NotificationKind.UPVOTE
        )
        _, replies = await service.list_for_recipient(
            author.id, kind=NotificationKind.POST_REPLY
        )

        assert upvotes == 2
        assert replies == 0

    @pytest.mark.asyncio
    async def test_mark_read_and_mark_all(self, unit_env):
        service, author = await self._fill(unit_env, 3)
        notifications, _ = await service.list_for_recipient(author.id)

        updated = await service.mark_read(notifications[0].id, author.id)
        assert updated.is_read is True
        assert await service.count_unread(author.id) == 2

        assert await service.mark_all_read(author.id) == 2
        assert await service.count_unread(author.id) == 0

    @pytest.mark.asyncio
    async def test_cannot_touch_someone_elses_notification(self, unit_env):
        service, author = await self._fill(unit_env, 1)
        [notification], _ = await service.list_for_recipient(author.id)
        stranger = UserId(uuid4())

        with pytest.raises(NotFoundError):
            await service.mark_read(notification.id, stranger)
        with pytest.raises(NotFoundError):
            await service.delete(notification.id, stranger)

        assert await service.count_unread(author.id) == 1

    @pytest.mark.asyncio
    async def test_delete_and_clear(self, unit_env):
        service, author = await self._fill(unit_env, 3)
        notifications, _ = await service.list_for_recipient(author.id)

        await service.delete(notifications[0].id, author.id)
        _, total = await service.list_for_recipient(author.id)
        assert total == 2

        assert await service.clear(author.id) == 2
        _, total = await service.list_for_recipient(author.id)
        assert total == 0

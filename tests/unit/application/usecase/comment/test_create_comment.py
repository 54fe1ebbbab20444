"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from agora.domain.error import NotFoundError, ValidationError
from agora.domain.repository import (
    CommentRepository,
    NotificationRepository,
    PostRepository,
    UserRepository,
)
from agora.domain.value import NotificationKind
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed(env):
    user_repo = await env.get(UserRepository)
    post_repo = await env.get(PostRepository)
    author = await user_repo.save(make_user("author"))
    commenter = await user_repo.save(make_user("commenter"))
    post = await post_repo.save(make_post(author))
    return author, commenter, post


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_increments_post_count(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        _, commenter, post = await seed(unit_env)

        # Act
        view = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id), text="Great post", author_id=str(commenter.id)
            )
        )

        # Assert
        assert view.depth == 0
        assert view.parent_id is None
        assert view.score == 0
        assert view.user_vote is None
        assert view.author_handle.root == "commenter"
        assert (await post_repo.find_by_id(post.id)).comment_count == 1

    @pytest.mark.asyncio
    async def test_comment_notifies_post_author(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        notification_repo = await unit_env.get(NotificationRepository)
        author, commenter, post = await seed(unit_env)

        await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id), text="Great post", author_id=str(commenter.id)
            )
        )

        [notification] = await notification_repo.find_by_recipient(author.id)
        assert notification.kind is NotificationKind.POST_REPLY
        assert notification.comment_excerpt == "Great post"

    @pytest.mark.asyncio
    async def test_reply_sets_depth_and_notifies_parent_author(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        author, commenter, post = await seed(unit_env)
        parent = await comment_repo.save(make_comment(author, post))

        view = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                text="I disagree",
                author_id=str(commenter.id),
                parent_id=str(parent.id),
            )
        )

        assert view.depth == 1
        assert view.parent_id == str(parent.id)
        [notification] = await notification_repo.find_by_recipient(author.id)
        assert notification.kind is NotificationKind.COMMENT_REPLY
        assert notification.comment_id is not None

    @pytest.mark.asyncio
    async def test_parent_from_another_post_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        author, commenter, post = await seed(unit_env)
        other_post = await post_repo.save(make_post(author, title="Other"))
        parent = await comment_repo.save(make_comment(author, other_post))

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(post.id),
                    text="Wrong thread",
                    author_id=str(commenter.id),
                    parent_id=str(parent.id),
                )
            )

        assert (await post_repo.find_by_id(post.id)).comment_count == 0

    @pytest.mark.asyncio
    async def test_missing_post_raises(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        _, commenter, _ = await seed(unit_env)

        with pytest.raises(NotFoundError, match="Post not found"):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(uuid4()), text="Hello?", author_id=str(commenter.id)
                )
            )

    @pytest.mark.asyncio
    async def test_missing_parent_raises(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        _, commenter, post = await seed(unit_env)

        with pytest.raises(NotFoundError, match="Parent comment not found"):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(post.id),
                    text="Hello?",
                    author_id=str(commenter.id),
                    parent_id=str(uuid4()),
                )
            )


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_comments_carry_viewer_vote(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author, commenter, post = await seed(unit_env)
        comment = make_comment(author, post)
        comment = await comment_repo.save(
            comment.with_votes(frozenset({commenter.id}), frozenset())
        )

        as_voter = await use_case.execute(
            GetCommentsRequest(post_id=str(post.id), viewer_id=str(commenter.id))
        )
        anonymous = await use_case.execute(GetCommentsRequest(post_id=str(post.id)))

        assert as_voter.comments[0].user_vote == "up"
        assert as_voter.comments[0].upvote_count == 1
        assert anonymous.comments[0].user_vote is None

    @pytest.mark.asyncio
    async def test_missing_post_raises(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentsRequest(post_id=str(uuid4())))

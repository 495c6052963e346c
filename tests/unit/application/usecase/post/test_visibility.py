"""Unit tests for the post visibility filter."""

from juicebox.application.usecase.post.visibility import filter_visible
from juicebox.domain.model import Author, Post
from juicebox.domain.value import PostId, UserId, Username


def _post(post_id: int, active: bool, author_id: int | None = 1) -> Post:
    author = (
        Author(id=UserId(author_id), username=Username(f"user{author_id}"))
        if author_id is not None
        else None
    )
    return Post(
        id=PostId(post_id), title="T", content="C", active=active, author=author
    )


class TestFilterVisible:
    """Tests for filter_visible."""

    def test_active_posts_visible_to_everyone(self):
        posts = [_post(1, True), _post(2, True)]

        assert filter_visible(posts, None) == posts
        assert filter_visible(posts, UserId(99)) == posts

    def test_inactive_post_hidden_from_anonymous(self):
        assert filter_visible([_post(1, False)], None) == []

    def test_inactive_post_hidden_from_other_users(self):
        assert filter_visible([_post(1, False, author_id=1)], UserId(2)) == []

    def test_inactive_post_visible_to_author(self):
        post = _post(1, False, author_id=1)

        assert filter_visible([post], UserId(1)) == [post]

    def test_inactive_post_without_author_hidden(self):
        assert filter_visible([_post(1, False, author_id=None)], UserId(1)) == []

    def test_keeps_input_order(self):
        posts = [_post(3, True), _post(1, False), _post(2, True)]

        result = filter_visible(posts, None)

        assert [post.id for post in result] == [3, 2]

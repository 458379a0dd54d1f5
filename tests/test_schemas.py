"""Test record and draft models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from schemas import PostTag, PostDraft, CommentDraft, PostWithStats, CommentWithStats


class TestPostDraft:
    """Compose-screen validation."""

    def test_accepts_valid_draft(self):
        draft = PostDraft(title="Hello", content="World", tag="Question")
        assert draft.tag == "Question"

    def test_defaults_tag_to_general(self):
        assert PostDraft(title="Hello", content="World").tag == PostTag.GENERAL.value

    @pytest.mark.parametrize("field", ["title", "content"])
    def test_rejects_blank_fields(self, field):
        values = {"title": "Hello", "content": "World", field: "   "}
        with pytest.raises(ValidationError):
            PostDraft(**values)

    def test_rejects_unknown_tag(self):
        with pytest.raises(ValidationError):
            PostDraft(title="Hello", content="World", tag="Random")

    def test_all_tags_allowed(self):
        for tag in ["General", "Question", "Request", "Nsfw", "Spoiler"]:
            assert PostDraft(title="t", content="c", tag=tag).tag == tag


class TestCommentDraft:
    def test_rejects_blank_content(self):
        with pytest.raises(ValidationError):
            CommentDraft(content="")


class TestRecords:
    def test_parses_engine_timestamp(self):
        """SQLite CURRENT_TIMESTAMP text should parse into a datetime."""
        post = PostWithStats(
            id=1, user_id=1, title="t", content="c", tag="General",
            created_at="2024-05-01 12:30:00", like_count=0, comment_count=0, liked_by_user=0,
        )
        assert post.created_at == datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)
        assert post.created_at.tzinfo is timezone.utc
        assert post.liked_by_user is False

    def test_comment_timestamp_is_utc(self):
        comment = CommentWithStats(
            id=1, post_id=1, user_id=1, content="c",
            created_at="2024-05-01 12:30:00", like_count=0, liked_by_user=1,
        )
        assert comment.created_at.tzinfo is timezone.utc
        assert comment.created_at.hour == 12

    def test_keeps_explicit_offset(self):
        post = PostWithStats(
            id=1, title="t", content="c", created_at="2024-05-01T12:30:00+02:00",
        )
        assert post.created_at.utcoffset().total_seconds() == 7200

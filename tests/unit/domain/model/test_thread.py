"""Unit tests for the Thread aggregate."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from forum.domain.model import reputation_from_score
from forum.domain.value import TagId, UserId, VoteType
from tests.conftest import down, make_reply, make_thread, up


class TestReputationFromScore:
    """Tests for reputation_from_score."""

    def test_ten_points_per_vote(self):
        """Each point of net score should be worth ten reputation."""
        assert reputation_from_score(2) == 20

    def test_floored_at_zero(self):
        """Negative scores should give zero reputation."""
        assert reputation_from_score(-5) == 0

    def test_custom_points_per_vote(self):
        """A configured rate should be applied."""
        assert reputation_from_score(3, points_per_vote=5) == 15


class TestThread:
    """Tests for Thread."""

    def test_author_reputation_from_own_votes(self):
        """Three upvotes and one downvote should give 20 reputation."""
        votes = [up(UserId(uuid4())) for _ in range(3)] + [down(UserId(uuid4()))]
        thread = make_thread(votes=votes)

        assert thread.net_score == 2
        assert thread.author_reputation() == 20

    def test_author_reputation_ignores_reply_votes(self):
        """Votes on replies should not count toward the author's reputation."""
        reply = make_reply(votes=[up(UserId(uuid4())) for _ in range(4)])
        thread = make_thread(replies=[reply])

        assert thread.author_reputation() == 0

    def test_negative_score_gives_zero_reputation(self):
        """A downvoted thread should floor its author's reputation at zero."""
        thread = make_thread(votes=[down(UserId(uuid4())) for _ in range(5)])

        assert thread.net_score == -5
        assert thread.author_reputation() == 0

    def test_reply_count_includes_nested(self, reply_tree):
        """reply_count should include replies at every depth."""
        replies, _ = reply_tree
        thread = make_thread(replies=replies)

        assert thread.reply_count == 4

    def test_user_vote(self):
        """user_vote should report a user's current vote."""
        user_id = UserId(uuid4())
        thread = make_thread(votes=[down(user_id)])

        assert thread.user_vote(user_id) == VoteType.DOWNVOTE
        assert thread.user_vote(UserId(uuid4())) is None

    @pytest.mark.parametrize("title", ["abcd", "x" * 201])
    def test_title_length_enforced(self, title):
        """Titles outside 5-200 characters should be rejected."""
        with pytest.raises(ValidationError):
            make_thread(title=title)

    def test_content_length_enforced(self):
        """Content shorter than 10 characters should be rejected."""
        with pytest.raises(ValidationError):
            make_thread(content="too short")

    def test_at_most_five_tags(self):
        """More than five tags should be rejected."""
        with pytest.raises(ValidationError):
            make_thread(tag_ids={TagId(uuid4()) for _ in range(6)})

    def test_assignment_is_validated(self):
        """Mutating a field should run validation."""
        thread = make_thread()

        with pytest.raises(ValidationError):
            thread.views = -1

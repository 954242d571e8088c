"""Domain model entities for the forum."""

from forum.domain.model.reply import (
    Reply,
    count_replies,
    iter_replies,
    locate_reply,
    locate_reply_with_depth,
    walk_replies,
)
from forum.domain.model.thread import Thread, reputation_from_score
from forum.domain.model.user import User
from forum.domain.model.vote import Votable, Vote, apply_vote, net_score

__all__ = [
    "User",
    "Thread",
    "Reply",
    "Vote",
    "Votable",
    "apply_vote",
    "net_score",
    "iter_replies",
    "walk_replies",
    "locate_reply",
    "locate_reply_with_depth",
    "count_replies",
    "reputation_from_score",
]

"""Resolve symbolic git references to immutable revisions."""

from __future__ import annotations

import logging

from tinc.constants.cache import GIT_REV_ALPHABET, GIT_REV_LENGTH
from tinc.exceptions import InvalidReferenceError
from tinc.process import Git

logger = logging.getLogger(__name__)


def is_git_rev(ref: str) -> bool:
    """Return True for a full 40-character lowercase hex revision id."""
    return len(ref) == GIT_REV_LENGTH and all(char in GIT_REV_ALPHABET for char in ref)


def resolve_git_ref(git: Git, url: str, ref: str) -> str:
    """Return the revision *ref* names in *url*.

    Already-pinned revisions are returned without contacting the remote.
    """
    if is_git_rev(ref):
        return ref

    output = git.ls_remote(url, ref)
    tokens = output.split()
    if not tokens or not is_git_rev(tokens[0]):
        raise InvalidReferenceError(ref, url)

    logger.info("Resolved %s of %s to %s", ref, url, tokens[0])
    return tokens[0]

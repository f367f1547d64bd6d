"""ballot_box - an owner-gated proposal store with one vote per identity.

The core lives in ``contract.VotingSystem``; ``server`` exposes it over HTTP.
"""

from .contract import VotingSystem
from .errors import AlreadyVoted, OnlyOwnerCanPerformAction, ProposalDoesNotExist, VotingError
from .events import ProposalCreated, RecordingEmitter, VoteCast

__all__ = [
    "VotingSystem",
    "VotingError",
    "OnlyOwnerCanPerformAction",
    "ProposalDoesNotExist",
    "AlreadyVoted",
    "ProposalCreated",
    "VoteCast",
    "RecordingEmitter",
]

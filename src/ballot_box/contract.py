"""Voting system: owner-gated proposal creation and one-vote-per-identity tallies.

This module provides:
- VotingSystem.create_proposal: owner-only, allocates the next proposal id
- VotingSystem.vote: any identity, at most once per proposal
- VotingSystem.get_proposal / total_proposals: open reads

The caller identity is passed in by whatever hosts the system (the Flask
front end, a test, a script); it is taken as already authenticated.
"""

from typing import Optional, Tuple
import logging

from . import gate
from .errors import AlreadyVoted, VotingError
from .events import Emitter, ProposalCreated, RecordingEmitter, VoteCast
from .ledger import ProposalLedger
from .registry import VoteRegistry


logger = logging.getLogger(__name__)


class VotingSystem:
    def __init__(self, owner: str, emitter: Optional[Emitter] = None) -> None:
        """Create an empty ballot box owned by ``owner``.

        Args:
            owner: identity of the initializing caller. It is the only
                identity allowed to create proposals and cannot be changed.
            emitter: receives notifications. Defaults to a RecordingEmitter.
        """
        self._owner = owner
        self.emitter = emitter if emitter is not None else RecordingEmitter()
        self.ledger = ProposalLedger()
        self.registry = VoteRegistry()

    @property
    def owner(self) -> str:
        return self._owner

    def create_proposal(self, caller: str, description: str) -> int:
        """Create a proposal and return its id.

        Raises:
            OnlyOwnerCanPerformAction: caller is not the owner. Nothing is
                stored and no notification is emitted.
        """
        try:
            gate.authorize(caller, self._owner)
        except VotingError as e:
            logger.warning(
                "create_proposal refused", extra={"caller": caller, "error_code": e.code}
            )
            raise
        proposal_id = self.ledger.create(description)
        logger.info("proposal created", extra={"proposal_id": proposal_id, "caller": caller})
        self._publish(ProposalCreated(id=proposal_id, title=description))
        return proposal_id

    def vote(self, caller: str, proposal_id: int) -> None:
        """Record one vote from ``caller`` on ``proposal_id``.

        Both checks run before anything is written, so a rejected vote
        leaves the ledger, the registry and the emitter untouched.

        Raises:
            ProposalDoesNotExist: no proposal with that id.
            AlreadyVoted: caller has already voted on this proposal.
        """
        try:
            self.ledger.get(proposal_id)
            if self.registry.has_voted(proposal_id, caller):
                raise AlreadyVoted(proposal_id, caller)
        except VotingError as e:
            logger.warning(
                "vote refused",
                extra={"proposal_id": proposal_id, "caller": caller, "error_code": e.code},
            )
            raise

        # commit: neither step can fail once the checks above passed
        updated = self.ledger.increment_votes(proposal_id)
        self.registry.mark_voted(proposal_id, caller)
        logger.info(
            "vote cast (%d total)", updated.votes,
            extra={"proposal_id": proposal_id, "caller": caller},
        )
        self._publish(VoteCast(proposal_id=proposal_id, voter=caller))

    def _publish(self, event) -> None:
        # fire-and-forget: runs after the commit and never fails the call
        try:
            self.emitter.emit(event)
        except Exception:
            logger.exception("emitter failed for %s", event.name)

    def get_proposal(self, proposal_id: int) -> Tuple[str, int]:
        """Return ``(description, votes)`` for a proposal.

        Raises:
            ProposalDoesNotExist: no proposal with that id.
        """
        return self.ledger.get(proposal_id).as_tuple()

    def total_proposals(self) -> int:
        return self.ledger.count()

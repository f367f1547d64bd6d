"""Proposal ledger: dense, monotonically numbered proposal records.

Ids are allocated from ``0`` upward and never reused. Both the proposal
counter and each vote counter are unsigned 32-bit values that clamp at
``U32_MAX`` instead of wrapping around.
"""

from dataclasses import dataclass, replace
from typing import Dict, Tuple

from .errors import ProposalDoesNotExist


U32_MAX = 2**32 - 1


def saturating_add(value: int, step: int = 1, limit: int = U32_MAX) -> int:
    return min(value + step, limit)


@dataclass(frozen=True)
class Proposal:
    description: str
    votes: int = 0

    def as_tuple(self) -> Tuple[str, int]:
        return self.description, self.votes


class ProposalLedger:
    def __init__(self) -> None:
        self._proposals: Dict[int, Proposal] = {}
        self._count = 0

    def create(self, description: str) -> int:
        """Store a new proposal with zero votes and return its id.

        Authorization is the caller's job; this always succeeds.
        """
        proposal_id = self._count
        self._proposals[proposal_id] = Proposal(description=description)
        self._count = saturating_add(self._count)
        return proposal_id

    def get(self, proposal_id: int) -> Proposal:
        # bool is an int subclass but never a valid id
        if isinstance(proposal_id, bool) or not isinstance(proposal_id, int):
            raise ProposalDoesNotExist(proposal_id)
        if not 0 <= proposal_id < self._count:
            raise ProposalDoesNotExist(proposal_id)
        try:
            return self._proposals[proposal_id]
        except KeyError:
            raise ProposalDoesNotExist(proposal_id) from None

    def increment_votes(self, proposal_id: int) -> Proposal:
        """Add one vote to a proposal and return the updated record.

        Only the voting flow calls this, after existence and uniqueness
        have been checked.
        """
        current = self.get(proposal_id)
        updated = replace(current, votes=saturating_add(current.votes))
        self._proposals[proposal_id] = updated
        return updated

    def count(self) -> int:
        return self._count

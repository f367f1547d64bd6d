"""Vote registry: which identities have voted on which proposals."""

from typing import Set, Tuple


class VoteRegistry:
    """Set of ``(proposal_id, voter)`` marks.

    A mark is only ever added, never removed. Any pair that was never
    written reads as not voted.
    """

    def __init__(self) -> None:
        self._marks: Set[Tuple[int, str]] = set()

    def has_voted(self, proposal_id: int, voter: str) -> bool:
        return (proposal_id, voter) in self._marks

    def mark_voted(self, proposal_id: int, voter: str) -> None:
        self._marks.add((proposal_id, voter))

    def __len__(self) -> int:
        return len(self._marks)

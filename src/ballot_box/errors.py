"""Error kinds raised by the voting core.

Every failure is terminal for the call that triggered it and leaves the
system state untouched. The HTTP layer maps ``http_status`` and ``code``
onto its JSON envelope.
"""

from typing import Any, Dict


class VotingError(Exception):
    """Base class for all voting core failures."""

    code = "VotingError"
    http_status = 400

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.code)
        self.message = message or self.code

    def to_response(self) -> Dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


class OnlyOwnerCanPerformAction(VotingError, PermissionError):
    code = "OnlyOwnerCanPerformAction"
    http_status = 403


class ProposalDoesNotExist(VotingError, LookupError):
    code = "ProposalDoesNotExist"
    http_status = 404

    def __init__(self, proposal_id: Any) -> None:
        super().__init__(f"proposal {proposal_id!r} does not exist")
        self.proposal_id = proposal_id


class AlreadyVoted(VotingError):
    code = "AlreadyVoted"
    http_status = 409

    def __init__(self, proposal_id: int, voter: str) -> None:
        super().__init__(f"{voter} already voted on proposal {proposal_id}")
        self.proposal_id = proposal_id
        self.voter = voter

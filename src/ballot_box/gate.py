"""Owner check for restricted actions."""

from .errors import OnlyOwnerCanPerformAction


def authorize(acting_identity: str, owner_identity: str) -> None:
    """Raise OnlyOwnerCanPerformAction unless the caller is the owner."""
    if acting_identity != owner_identity:
        raise OnlyOwnerCanPerformAction(
            f"{acting_identity} is not the owner of this ballot box"
        )

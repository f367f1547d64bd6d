"""Notifications published after successful mutations.

The voting core only knows about the ``Emitter`` protocol: anything with an
``emit(event)`` method. Emitters are fire-and-forget; they are called after
the state change that caused the event has been committed.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Protocol, Type, TypeVar
import logging


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProposalCreated:
    id: int
    title: str

    name = "ProposalCreated"

    def to_dict(self) -> Dict[str, Any]:
        return {"event": self.name, **asdict(self)}


@dataclass(frozen=True)
class VoteCast:
    proposal_id: int
    voter: str

    name = "VoteCast"

    def to_dict(self) -> Dict[str, Any]:
        return {"event": self.name, **asdict(self)}


class Emitter(Protocol):
    def emit(self, event: Any) -> None: ...


E = TypeVar("E")


class RecordingEmitter:
    """Keep every event in publication order."""

    def __init__(self) -> None:
        self.events: List[Any] = []

    def emit(self, event: Any) -> None:
        self.events.append(event)

    def of_type(self, cls: Type[E]) -> List[E]:
        return [e for e in self.events if isinstance(e, cls)]


class LoggingEmitter:
    def emit(self, event: Any) -> None:
        logger.info("event %s", event.name, extra={"event": event.to_dict()})


class FanoutEmitter:
    """Forward each event to several emitters, in the given order."""

    def __init__(self, emitters: Iterable[Emitter]) -> None:
        self.emitters = list(emitters)

    def emit(self, event: Any) -> None:
        for emitter in self.emitters:
            emitter.emit(event)

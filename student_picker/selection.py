# selection.py - Roster bookkeeping and no-repeat random picks

import logging
import random
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


class SelectionError(Exception):
    """Base class for selection failures."""


class Exhausted(SelectionError):
    """Every roster entry has already been picked."""


class InvalidTicket(SelectionError):
    """Ticket is unknown, already committed or released."""


class PickPending(SelectionError):
    """A ticket is already outstanding."""


@dataclass(frozen=True, eq=False)
class Ticket:
    """One-use pick authorization; only the issued instance is valid."""

    serial: int


@dataclass(frozen=True)
class PickResult:
    index: int
    name: str
    number: int      # 1-based display number
    remaining: int


class SelectionState:
    """Tracks which roster entries were picked and draws the next one.

    Picking is split in two steps. request_pick() hands out a ticket without
    touching the used set, so the reveal animation can run (or be cancelled)
    before commit_pick() actually draws a name.

    rng only needs a randrange(n) method returning a uniform int in [0, n).
    """

    def __init__(self, roster, rng=None):
        self._roster = tuple(roster)
        if not self._roster:
            raise ValueError("roster must contain at least one name")
        self._rng = rng if rng is not None else random.Random()
        self._used = set()
        self._next_serial = 1
        self._outstanding: Optional[Ticket] = None

    @property
    def roster(self) -> tuple:
        return self._roster

    @property
    def total(self) -> int:
        return len(self._roster)

    @property
    def used_count(self) -> int:
        return len(self._used)

    @property
    def remaining_count(self) -> int:
        return self.total - len(self._used)

    @property
    def used_indices(self) -> frozenset:
        return frozenset(self._used)

    @property
    def pending(self) -> Optional[Ticket]:
        return self._outstanding

    def is_exhausted(self) -> bool:
        return len(self._used) == len(self._roster)

    def request_pick(self) -> Ticket:
        """Authorize one pick. Raises Exhausted once every entry is used."""
        if self.is_exhausted():
            raise Exhausted(f"all {self.total} entries have been picked")
        if self._outstanding is not None:
            raise PickPending(f"ticket {self._outstanding.serial} is still outstanding")
        ticket = Ticket(self._next_serial)
        self._next_serial += 1
        self._outstanding = ticket
        return ticket

    def commit_pick(self, ticket: Ticket) -> PickResult:
        """Draw one unused index uniformly at random and record it."""
        self._check_outstanding(ticket)
        # Ascending order keeps the draw independent of set iteration order
        candidates = [i for i in range(len(self._roster)) if i not in self._used]
        index = candidates[self._rng.randrange(len(candidates))]
        self._used.add(index)
        self._outstanding = None

        result = PickResult(
            index=index,
            name=self._roster[index],
            number=index + 1,
            remaining=self.remaining_count,
        )
        logger.info("Picked #%d %s (%d remaining)", result.number, result.name, result.remaining)
        return result

    def release(self, ticket: Ticket):
        """Drop an outstanding ticket without picking anything."""
        self._check_outstanding(ticket)
        self._outstanding = None
        logger.debug("Released ticket %d", ticket.serial)

    def _check_outstanding(self, ticket):
        if self._outstanding is None or ticket is not self._outstanding:
            raise InvalidTicket(f"ticket {getattr(ticket, 'serial', ticket)!r} is not outstanding")

import logging
from typing import AbstractSet, FrozenSet, Iterable, List, Optional, Set, Tuple

from .board import POSITIONS, WINNING_LINES, Phase, Position, Role

logger = logging.getLogger(__name__)

RESULT_LINES = {
    Role.UNO: "Uno Wins",
    Role.DOS: "Dos Wins",
    Role.TRES: "Tres Wins",
}
NO_WINNER = "No Winner"

Snapshot = Tuple[FrozenSet[Position], FrozenSet[Position], FrozenSet[Position], Phase, bool]


def _holds_line(cells: AbstractSet[Position]) -> bool:
    return any(cells == line for line in WINNING_LINES)


class Game:
    """``free``, ``uno`` and ``tres`` always partition the 16 board positions."""

    def __init__(self) -> None:
        self.free: Set[Position] = set(POSITIONS)
        self.uno: Set[Position] = set()
        self.tres: Set[Position] = set()
        self._phase: Phase = Phase.TRES_OCCUPY
        self.is_over: bool = False

    @classmethod
    def from_occupancy(
        cls,
        uno: Iterable[Position] = (),
        tres: Iterable[Position] = (),
        phase: Phase = Phase.TRES_OCCUPY,
    ) -> "Game":
        uno = set(uno)
        tres = set(tres)
        if uno & tres:
            raise ValueError("Uno and Tres cannot occupy the same position")
        g = cls()
        g.uno = uno
        g.tres = tres
        g.free = set(POSITIONS) - uno - tres
        g._phase = phase
        return g

    @property
    def phase(self) -> Phase:
        return self._phase

    def current_role(self) -> Role:
        return self.phase.role

    def is_legal(self, position: Position) -> bool:
        if self.phase.occupies:
            return position in self.free
        return position in self.uno or position in self.tres

    def rejection_reason(self, position: Position) -> Optional[str]:
        if self.is_legal(position):
            return None
        if self.phase.occupies:
            return "Please input an unoccupied position's coordinates."
        return "Please input an occupied position's coordinates."

    def legal_moves(self) -> List[Position]:
        if self.phase.occupies:
            return sorted(self.free)
        return sorted(self.uno | self.tres)

    def apply_move(self, position: Position) -> bool:
        if not self.is_legal(position):
            logger.debug("rejected %s during %s", position, self.phase.value)
            return False
        if self.phase is Phase.TRES_OCCUPY:
            self.free.remove(position)
            self.tres.add(position)
        elif self.phase is Phase.UNO_OCCUPY:
            self.free.remove(position)
            self.uno.add(position)
        else:
            if position in self.uno:
                self.uno.remove(position)
            else:
                self.tres.remove(position)
            self.free.add(position)
        logger.debug("%s played %s", self.phase.role.name, position)
        self._phase = self._phase.next
        return True

    def check_over(self) -> bool:
        return (
            _holds_line(self.uno)
            or _holds_line(self.tres)
            or not self.free
        )

    def winner(self) -> Optional[Role]:
        if not self.is_over:
            return None
        if _holds_line(self.uno):
            return Role.UNO
        if not self.free:
            return Role.DOS
        if _holds_line(self.tres):
            return Role.TRES
        return None

    def result_line(self) -> str:
        w = self.winner()
        return RESULT_LINES[w] if w is not None else NO_WINNER

    def snapshot(self) -> Snapshot:
        return (
            frozenset(self.free),
            frozenset(self.uno),
            frozenset(self.tres),
            self.phase,
            self.is_over,
        )

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import FrozenSet, Iterable, List, Tuple

MAXIMUM = 4


class OutOfRange(ValueError):
    pass


class Role(IntEnum):
    UNO = 1
    DOS = 2
    TRES = 3


class Phase(Enum):
    TRES_OCCUPY = "tres-occupy"
    UNO_OCCUPY = "uno-occupy"
    DOS_VACATE = "dos-vacate"

    @property
    def role(self) -> Role:
        return _PHASE_ROLE[self]

    @property
    def occupies(self) -> bool:
        return self is not Phase.DOS_VACATE

    @property
    def next(self) -> "Phase":
        return _PHASE_NEXT[self]


_PHASE_ROLE = {
    Phase.TRES_OCCUPY: Role.TRES,
    Phase.UNO_OCCUPY: Role.UNO,
    Phase.DOS_VACATE: Role.DOS,
}

_PHASE_NEXT = {
    Phase.TRES_OCCUPY: Phase.UNO_OCCUPY,
    Phase.UNO_OCCUPY: Phase.DOS_VACATE,
    Phase.DOS_VACATE: Phase.TRES_OCCUPY,
}


@dataclass(frozen=True, order=True)
class Position:
    column: int
    row: int

    def __post_init__(self) -> None:
        for v in (self.column, self.row):
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError(f"coordinates must be int, got {v!r}")
        if not (1 <= self.column <= MAXIMUM and 1 <= self.row <= MAXIMUM):
            raise OutOfRange(f"({self.column}, {self.row}) is not on the board")

    def flatten(self) -> int:
        return self.column * 10 + self.row

    def __str__(self) -> str:
        return str(self.flatten())


def _compute_positions() -> FrozenSet[Position]:
    return frozenset(
        Position(c, r) for c in range(1, MAXIMUM + 1) for r in range(1, MAXIMUM + 1)
    )


def _compute_lines() -> Tuple[FrozenSet[Position], ...]:
    span = range(1, MAXIMUM + 1)
    left = frozenset(Position(1, r) for r in span)
    right = frozenset(Position(MAXIMUM, r) for r in span)
    diag = frozenset(Position(k, k) for k in span)
    anti = frozenset(Position(k, MAXIMUM + 1 - k) for k in span)
    return (left, right, diag, anti)


POSITIONS: FrozenSet[Position] = _compute_positions()
POSITION_KEYS: FrozenSet[int] = frozenset(p.flatten() for p in POSITIONS)
WINNING_LINES: Tuple[FrozenSet[Position], ...] = _compute_lines()


def position_from_key(key: int) -> Position:
    if key not in POSITION_KEYS:
        raise OutOfRange(f"{key} is not a board coordinate")
    return Position(key // 10, key % 10)


def render_grid(uno: Iterable[Position], tres: Iterable[Position]) -> str:
    uno = set(uno)
    tres = set(tres)
    sep = "  " + "+---" * MAXIMUM + "+"
    lines: List[str] = []
    for r in range(MAXIMUM, 0, -1):
        lines.append(sep)
        cells = []
        for c in range(1, MAXIMUM + 1):
            p = Position(c, r)
            if p in uno:
                cells.append("| 1 ")
            elif p in tres:
                cells.append("| 3 ")
            else:
                cells.append("|   ")
        lines.append(f"{r} " + "".join(cells) + "|")
    lines.append(sep)
    lines.append("    " + "   ".join(str(c) for c in range(1, MAXIMUM + 1)))
    return "\n".join(lines)

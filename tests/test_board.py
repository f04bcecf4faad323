from unodostres.board import (
    POSITIONS,
    POSITION_KEYS,
    WINNING_LINES,
    Phase,
    Position,
    Role,
    render_grid,
)


def test_sixteen_positions():
    assert len(POSITIONS) == 16
    assert POSITION_KEYS == {c * 10 + r for c in range(1, 5) for r in range(1, 5)}


def test_winning_lines():
    assert len(WINNING_LINES) == 4
    assert all(len(line) == 4 for line in WINNING_LINES)
    left = {Position(1, r) for r in range(1, 5)}
    right = {Position(4, r) for r in range(1, 5)}
    diag = {Position(1, 1), Position(2, 2), Position(3, 3), Position(4, 4)}
    anti = {Position(1, 4), Position(2, 3), Position(3, 2), Position(4, 1)}
    assert {frozenset(s) for s in (left, right, diag, anti)} == set(WINNING_LINES)


def test_phase_rotation():
    assert Phase.TRES_OCCUPY.next is Phase.UNO_OCCUPY
    assert Phase.UNO_OCCUPY.next is Phase.DOS_VACATE
    assert Phase.DOS_VACATE.next is Phase.TRES_OCCUPY
    assert Phase.TRES_OCCUPY.role == Role.TRES
    assert Phase.UNO_OCCUPY.role == Role.UNO
    assert Phase.DOS_VACATE.role == Role.DOS
    assert Phase.TRES_OCCUPY.occupies and Phase.UNO_OCCUPY.occupies
    assert not Phase.DOS_VACATE.occupies


def test_render_empty():
    text = render_grid(set(), set())
    lines = text.split("\n")
    assert lines[0] == "  +---+---+---+---+"
    assert lines[1] == "4 |   |   |   |   |"
    assert lines[-1] == "    1   2   3   4"
    assert len(lines) == 10


def test_render_markers():
    text = render_grid({Position(1, 4)}, {Position(4, 1)})
    lines = text.split("\n")
    assert lines[1] == "4 | 1 |   |   |   |"
    assert lines[7] == "1 |   |   |   | 3 |"

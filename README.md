# tetrikit

A small library for modelling Tetris games: a board of filled and empty
cells, tetromino pieces, the Super Rotation System (SRS) with its wall-kick
tables, a game state with hold and a piece queue, and a breadth-first search
that finds every reachable landing position of a piece, the moves that lead
there, and whether the landing counts as a T-spin.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `tetrikit.pieces`: `PieceType`, `Rotation`, the helpers `rotate_clockwise`,
  `rotate_counter_clockwise` and `rotate_180`, the frozen dataclasses
  `Position` and `PieceState`, and `Piece`, whose shape comes from a
  rotation system.
- `tetrikit.move`: `MoveType`, `Move`, `WallKickOffset` and `WallKickData`.
- `tetrikit.board`: `Board`.
- `tetrikit.rotation_system`: the abstract `RotationSystem`.
- `tetrikit.srs`: `SRS`, the Super Rotation System.
- `tetrikit.rule_factory`: `RuleFactory` and `get_rule_factory()`.
- `tetrikit.game_state`: `GameState`.
- `tetrikit.search_algorithm`: `LandingPosition`, `SearchConfig`, the
  abstract `SearchAlgorithm`, and the constants `NO_T_SPIN`, `T_SPIN` and
  `T_SPIN_MINI`.
- `tetrikit.path_search`: `PathSearch` and `detect_t_spin()`.
- `tetrikit.search_factory`: `SearchFactory` and `get_search_factory()`.

## Coordinates

`(0, 0)` is the bottom-left cell of the board. A board is at least 4 by 4
and at most 32 columns by 40 rows; other sizes raise `ValueError`. A
piece's position is the bottom-left corner of its 4×4 shape grid, and
`Piece.absolute_filled_cells()` gives its cells in board coordinates.

## The board

```python
from tetrikit.board import Board

board = Board(10, 20)
board.fill_cell(0, 0)
board.is_filled(0, 0)        # True
board.column_height(0)       # 1
board.roof                   # 1
cleared = board.clear_filled_rows()
```

Cells off the board read as empty, and filling or clearing them does
nothing. `clear_filled_rows()` removes every full row, lets the rows above
fall, and returns how many were removed.

## Playing a game

```python
from tetrikit.game_state import GameState
from tetrikit.move import Move, MoveType
from tetrikit.pieces import PieceType
from tetrikit.srs import SRS

state = GameState(10, 24, SRS())
state.spawn_piece(PieceType.T)

state.apply_move(Move(MoveType.LEFT))
state.apply_move(Move(MoveType.ROTATE_CLOCKWISE, 0))  # wall-kick test 0
state.apply_move(Move(MoveType.HARD_DROP))
cleared = state.lock_current_piece()

print(state)
```

`apply_move` returns `False`, and leaves the state as it was, when the move
would collide or leave the board, or when the game is over. A rotation
given a wall-kick index is shifted by that one offset from the rotation
system's table; the state does not try the other offsets itself. Giving a
wall-kick index to a move that is not a rotation raises `ValueError`.

`spawn_piece` raises `RuntimeError` when no rotation system is set; if the
spawned piece collides, `game_over` becomes true and it returns `False`.
Hold is a move too (`MoveType.HOLD`, or `hold_current_piece()`): it swaps
the active piece with the held one, or takes the next piece from
`next_pieces` when nothing is held, and can be used once until the next
`lock_current_piece()`. `clone()` returns an independent copy that shares
the rotation system.

## Finding placements

```python
from tetrikit.path_search import PathSearch
from tetrikit.search_algorithm import SearchConfig

search = PathSearch(SearchConfig(allow_rotate_180=False))
for landing in search.find_landing_positions(state, state.current_piece, 0):
    moves = " ".join(str(move) for move in landing.path)
    print(landing.piece.state, landing.t_spin_type, moves)
```

The search moves the piece left, right, down (if `allow_soft_drop`), hard
drop (if `allow_hard_drop`), and rotates it clockwise, counter-clockwise and
by half a turn (if `allow_rotate_180`). Rotations in the search are tried in
place, without wall kicks. A `max_depth` of `0` searches without a depth
limit.

`find_path` returns the shortest sequence of those moves from one piece
placement to another, or an empty list when the target cannot be reached.
`detect_t_spin` classifies a T piece by the four corners around its
position: `0` (no T-spin), `1` (T-spin) or `2` (mini T-spin); it is `0`
whenever the last move was not a rotation.

## Factories

Rotation systems and search algorithms can be looked up by name:

```python
from tetrikit.rule_factory import get_rule_factory
from tetrikit.search_factory import get_search_factory

rules = get_rule_factory()
rules.register("SRS", SRS())
srs = rules.create("SRS")

search = get_search_factory().create("PathSearch")
print(get_search_factory().names())   # ['PathSearch']
```

The rule factory starts empty; `SRS` has to be registered before it can be
created. `create` hands back a fresh copy of the registered prototype, or
`None` when the name is unknown. The search factory comes with
`"PathSearch"` registered, keeps the first algorithm registered under a
name, and creates only `PathSearch` instances; other names give `None`.

## What the package does not do

- It is a library only: there is no command to run, no screen, no
  rendering and no input handling.
- There is no piece randomiser, gravity, timing or scoring; the caller
  fills `next_pieces` and decides when to lock a piece.
- `SearchConfig.is_20g` and `SearchConfig.last_rotation_only` are carried
  in the configuration but `PathSearch` does not act on them, and the search
  leaves `LandingPosition.lines_cleared` at `0`.
- `SRS` is the only rotation system provided, and it has no 180-degree
  kicks (`supports_180_rotation()` is `False`).
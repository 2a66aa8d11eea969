"""Breadth-first search over piece positions."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional

from .game_state import GameState
from .move import Move, MoveType
from .pieces import (
    Piece,
    PieceType,
    Position,
    Rotation,
    rotate_180,
    rotate_clockwise,
    rotate_counter_clockwise,
)
from .search_algorithm import (
    NO_T_SPIN,
    T_SPIN,
    T_SPIN_MINI,
    LandingPosition,
    SearchAlgorithm,
    SearchConfig,
)

_ROTATION_MOVES = frozenset(
    {MoveType.ROTATE_CLOCKWISE, MoveType.ROTATE_COUNTER_CLOCKWISE, MoveType.ROTATE_180}
)

# Corner pairs (indices into A, B, C, D) that make a mini T-spin per rotation.
_MINI_CORNERS = {
    Rotation.R0: (0, 1),
    Rotation.R90: (1, 3),
    Rotation.R180: (2, 3),
    Rotation.R270: (0, 2),
}


@dataclass(eq=False)
class _Node:
    piece: Piece
    last_move: Move
    parent: Optional[_Node]
    depth: int = 0

    def path(self) -> list[Move]:
        moves = []
        node = self
        while node.parent is not None:
            moves.append(node.last_move)
            node = node.parent
        moves.reverse()
        return moves


def detect_t_spin(
    game_state: GameState, piece: Piece, last_move_was_rotation: bool
) -> int:
    """Classify a placement as no T-spin (0), a T-spin (1) or a mini T-spin (2)."""
    state = piece.state
    if state.piece_type is not PieceType.T or not last_move_was_rotation:
        return NO_T_SPIN

    board = game_state.board

    def occupied(x: int, y: int) -> bool:
        if not (0 <= x < board.width and 0 <= y < board.height):
            return True
        return board.is_filled(x, y)

    px, py = state.position.x, state.position.y
    corners = (
        occupied(px - 1, py + 1),  # A: top-left
        occupied(px + 1, py + 1),  # B: top-right
        occupied(px - 1, py - 1),  # C: bottom-left
        occupied(px + 1, py - 1),  # D: bottom-right
    )
    count = sum(corners)
    if count >= 3:
        return T_SPIN
    if count == 2:
        first, second = _MINI_CORNERS[Rotation(state.rotation)]
        if corners[first] and corners[second]:
            return T_SPIN_MINI
    return NO_T_SPIN


class PathSearch(SearchAlgorithm):
    """Breadth-first search for landing positions and paths between them."""

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        super().__init__(config)

    @property
    def name(self) -> str:
        return "PathSearch"

    def initialize(self, config: SearchConfig) -> None:
        self.config = config

    def find_landing_positions(
        self, game_state: GameState, piece: Piece, max_depth: int = 0
    ) -> list[LandingPosition]:
        found = []
        for node in self._bfs(game_state, piece, max_depth):
            if not self._is_landed(game_state, node.piece):
                continue
            path = node.path()
            rotated = bool(path) and path[-1].type in _ROTATION_MOVES
            found.append(
                LandingPosition(
                    piece=node.piece,
                    path=path,
                    t_spin_type=detect_t_spin(game_state, node.piece, rotated),
                )
            )
        return found

    def find_path(
        self, game_state: GameState, start_piece: Piece, target_piece: Piece
    ) -> list[Move]:
        target = target_piece.state
        for node in self._bfs(game_state, start_piece):
            if node.piece.state == target:
                return node.path()
        return []

    def can_place_piece(self, game_state: GameState, piece: Piece) -> bool:
        board = game_state.board
        return all(
            0 <= cell.x < board.width
            and 0 <= cell.y < board.height
            and not board.is_filled(cell.x, cell.y)
            for cell in piece.absolute_filled_cells()
        )

    def _bfs(
        self, game_state: GameState, piece: Piece, max_depth: int = 0
    ) -> Iterator[_Node]:
        moves = self._possible_moves()
        queue = deque([_Node(piece, Move(MoveType.DOWN), None)])
        visited = {piece.state}
        while queue:
            node = queue.popleft()
            if max_depth > 0 and node.depth >= max_depth:
                continue
            yield node
            for move in moves:
                moved = self._apply_move(game_state, node.piece, move)
                if moved.state in visited or not self.can_place_piece(game_state, moved):
                    continue
                visited.add(moved.state)
                queue.append(_Node(moved, move, node, node.depth + 1))

    def _possible_moves(self) -> list[Move]:
        config = self.config
        kinds = [MoveType.LEFT, MoveType.RIGHT]
        if config.allow_soft_drop:
            kinds.append(MoveType.DOWN)
        if config.allow_hard_drop:
            kinds.append(MoveType.HARD_DROP)
        kinds += [MoveType.ROTATE_CLOCKWISE, MoveType.ROTATE_COUNTER_CLOCKWISE]
        if config.allow_rotate_180:
            kinds.append(MoveType.ROTATE_180)
        return [Move(kind) for kind in kinds]

    @staticmethod
    def _moved(piece: Piece, state) -> Piece:
        return Piece(state, piece.rotation_system)

    def _apply_move(self, game_state: GameState, piece: Piece, move: Move) -> Piece:
        state = piece.state
        pos = state.position
        kind = move.type
        if kind is MoveType.LEFT:
            pos = Position(pos.x - 1, pos.y)
        elif kind is MoveType.RIGHT:
            pos = Position(pos.x + 1, pos.y)
        elif kind is MoveType.DOWN:
            pos = Position(pos.x, pos.y - 1)
        elif kind is MoveType.UP:
            pos = Position(pos.x, pos.y + 1)
        elif kind is MoveType.ROTATE_CLOCKWISE:
            state = state.with_rotation(rotate_clockwise(state.rotation))
        elif kind is MoveType.ROTATE_COUNTER_CLOCKWISE:
            state = state.with_rotation(rotate_counter_clockwise(state.rotation))
        elif kind is MoveType.ROTATE_180:
            state = state.with_rotation(rotate_180(state.rotation))
        elif kind is MoveType.HARD_DROP:
            return self._hard_drop(game_state, piece)
        return self._moved(piece, state.with_position(pos))

    def _hard_drop(self, game_state: GameState, piece: Piece) -> Piece:
        state = piece.state
        pos = state.position
        low, high = 0, game_state.board.height
        while low < high:
            mid = low + (high - low) // 2
            probe = self._moved(piece, state.with_position(Position(pos.x, pos.y - mid)))
            if self.can_place_piece(game_state, probe):
                low = mid + 1
            else:
                high = mid
        if low > 0:
            pos = Position(pos.x, pos.y - (low - 1))
        return self._moved(piece, state.with_position(pos))

    def _is_landed(self, game_state: GameState, piece: Piece) -> bool:
        pos = piece.state.position
        lower = self._moved(piece, piece.state.with_position(Position(pos.x, pos.y - 1)))
        return not self.can_place_piece(game_state, lower)

    def __repr__(self) -> str:
        return f"PathSearch({self.config!r})"
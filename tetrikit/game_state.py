"""The state of a game: board, active piece, hold slot and queue."""

from __future__ import annotations

import copy
from collections import deque
from typing import Optional

from .board import Board
from .move import Move, MoveType, WallKickData
from .pieces import (
    Piece,
    PieceState,
    PieceType,
    Position,
    rotate_180,
    rotate_clockwise,
    rotate_counter_clockwise,
)
from .rotation_system import RotationSystem


class GameState:
    """A running game: the board, the active piece and what comes next."""

    def __init__(
        self,
        width: int,
        height: int,
        rotation_system: Optional[RotationSystem] = None,
    ) -> None:
        self.board = Board(width, height)
        self.current_piece = Piece.blank()
        self.held_piece: Optional[PieceType] = None
        self.hold_used = False
        self.next_pieces: deque[PieceType] = deque()
        self.lines_cleared = 0
        self.game_over = False
        self._rotation_system: Optional[RotationSystem] = None
        self.rotation_system = rotation_system

    @property
    def rotation_system(self) -> Optional[RotationSystem]:
        return self._rotation_system

    @rotation_system.setter
    def rotation_system(self, rotation_system: Optional[RotationSystem]) -> None:
        self._rotation_system = rotation_system
        if rotation_system is not None:
            self.current_piece.rotation_system = rotation_system

    def _kicked(self, position: Position, kicks: WallKickData, index: int) -> Position:
        if index < len(kicks):
            return position + kicks.offset(index).to_position()
        return position

    def apply_move(self, move: Move) -> bool:
        """Apply a move to the active piece; return whether it was made."""
        if self.game_over:
            return False

        state = self.current_piece.state
        pos = state.position
        kick = move.wall_kick_index
        system = self._rotation_system

        if move.type is MoveType.LEFT:
            pos = Position(pos.x - 1, pos.y)
        elif move.type is MoveType.RIGHT:
            pos = Position(pos.x + 1, pos.y)
        elif move.type in (MoveType.DOWN, MoveType.SOFT_DROP):
            pos = Position(pos.x, pos.y - 1)
        elif move.type is MoveType.UP:
            pos = Position(pos.x, pos.y + 1)
        elif move.type is MoveType.ROTATE_CLOCKWISE:
            from_rotation = state.rotation
            state = state.with_rotation(rotate_clockwise(from_rotation))
            if kick >= 0 and system is not None:
                kicks = system.clockwise_wall_kicks(state.piece_type, from_rotation)
                pos = self._kicked(pos, kicks, kick)
        elif move.type is MoveType.ROTATE_COUNTER_CLOCKWISE:
            from_rotation = state.rotation
            state = state.with_rotation(rotate_counter_clockwise(from_rotation))
            if kick >= 0 and system is not None:
                kicks = system.counter_clockwise_wall_kicks(
                    state.piece_type, from_rotation
                )
                pos = self._kicked(pos, kicks, kick)
        elif move.type is MoveType.ROTATE_180:
            from_rotation = state.rotation
            state = state.with_rotation(rotate_180(from_rotation))
            if kick >= 0 and system is not None:
                kicks = system.wall_kicks_180(state.piece_type, from_rotation)
                pos = self._kicked(pos, kicks, kick)
        elif move.type is MoveType.HARD_DROP:
            while not self.check_collision(state, Position(pos.x, pos.y - 1)):
                pos = Position(pos.x, pos.y - 1)
        elif move.type is MoveType.HOLD:
            if self.hold_used:
                return False
            return self.hold_current_piece()

        state = state.with_position(pos)
        if not self.is_valid_state(state):
            return False
        self.current_piece.state = state
        return True

    def is_valid_state(self, state: PieceState) -> bool:
        """Whether a piece in ``state`` lies on the board without overlapping."""
        piece = Piece(state, self._rotation_system)
        board = self.board
        return all(
            0 <= cell.x < board.width
            and 0 <= cell.y < board.height
            and not board.is_filled(cell.x, cell.y)
            for cell in piece.absolute_filled_cells()
        )

    def check_collision(self, state: PieceState, position: Position) -> bool:
        """Whether ``state`` moved to ``position`` would collide."""
        return not self.is_valid_state(state.with_position(position))

    def lock_current_piece(self) -> int:
        """Fix the active piece to the board and return the lines it cleared."""
        for cell in self.current_piece.absolute_filled_cells():
            self.board.fill_cell(cell.x, cell.y)
        cleared = self.board.clear_filled_rows()
        self.lines_cleared += cleared
        self.hold_used = False
        return cleared

    def spawn_piece(self, piece_type: PieceType) -> bool:
        """Spawn a piece; on collision the game ends and False is returned."""
        if self._rotation_system is None:
            raise RuntimeError("rotation system not set")
        state = self._rotation_system.initial_state(
            piece_type, self.board.width, self.board.height
        )
        self.current_piece = Piece(state, self._rotation_system)
        if not self.is_valid_state(state):
            self.game_over = True
            return False
        return True

    def spawn_next_piece(self) -> bool:
        """Spawn the first piece of the queue; False if it is empty or blocked."""
        if not self.next_pieces:
            return False
        return self.spawn_piece(self.next_pieces.popleft())

    def hold_current_piece(self) -> bool:
        """Put the active piece on hold and bring in the held or next piece."""
        if self.hold_used:
            return False

        current_type = self.current_piece.state.piece_type
        held_type = self.held_piece
        self.held_piece = current_type

        if held_type is not None:
            if not self.spawn_piece(held_type):
                self.held_piece = held_type
                return False
        elif not self.spawn_next_piece():
            self.held_piece = None
            return False

        self.hold_used = True
        return True

    def clone(self) -> GameState:
        """Return an independent copy; the rotation system is shared."""
        other = GameState(self.board.width, self.board.height)
        other.board = self.board.copy()
        other._rotation_system = self._rotation_system
        other.current_piece = copy.copy(self.current_piece)
        other.held_piece = self.held_piece
        other.hold_used = self.hold_used
        other.next_pieces = deque(self.next_pieces)
        other.lines_cleared = self.lines_cleared
        other.game_over = self.game_over
        return other

    def _current_piece_collides(self) -> bool:
        board = self.board
        return any(
            not (0 <= cell.x < board.width and 0 <= cell.y < board.height)
            or board.is_filled(cell.x, cell.y)
            for cell in self.current_piece.absolute_filled_cells()
        )

    def __str__(self) -> str:
        held = self.held_piece.name if self.held_piece is not None else "None"
        queue = "".join(f"{piece.name} " for piece in self.next_pieces)
        return (
            "Game State:\n"
            f"  Board: {self.board.width}x{self.board.height}\n"
            f"  Current Piece: {self.current_piece.state.piece_type.name}\n"
            f"  Held Piece: {held}\n"
            f"  Hold Used: {'Yes' if self.hold_used else 'No'}\n"
            f"  Next Pieces: {queue}\n"
            f"  Lines Cleared: {self.lines_cleared}\n"
            f"  Game Over: {'Yes' if self.game_over else 'No'}\n"
        )
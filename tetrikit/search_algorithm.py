"""Landing positions, search configuration and the search interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from .game_state import GameState
from .move import Move
from .pieces import Piece

#: The placement is not a T-spin.
NO_T_SPIN = 0
#: The placement is a full T-spin.
T_SPIN = 1
#: The placement is a mini T-spin.
T_SPIN_MINI = 2


@dataclass
class LandingPosition:
    """A place a piece can come to rest, with the moves that lead there."""

    piece: Piece = field(default_factory=Piece.blank)
    path: list[Move] = field(default_factory=list)
    t_spin_type: int = NO_T_SPIN
    lines_cleared: int = 0
    valid: bool = True

    def add_move(self, move: Move) -> None:
        """Append a move to the path."""
        self.path.append(move)

    def is_t_spin(self) -> bool:
        """Whether the placement is a T-spin of either kind."""
        return self.t_spin_type > NO_T_SPIN


@dataclass(frozen=True)
class SearchConfig:
    """Options that control which moves a search may use."""

    allow_rotate_180: bool = False
    allow_hard_drop: bool = True
    allow_soft_drop: bool = True
    is_20g: bool = False
    last_rotation_only: bool = False


class SearchAlgorithm(ABC):
    """Finds where a piece can land and how to get it there."""

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.config = config if config is not None else SearchConfig()

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the search algorithm."""

    @abstractmethod
    def initialize(self, config: SearchConfig) -> None:
        """Set up the algorithm with ``config``."""

    @abstractmethod
    def find_landing_positions(
        self, game_state: GameState, piece: Piece, max_depth: int = 0
    ) -> list[LandingPosition]:
        """All landing positions reachable within ``max_depth`` moves (0: no limit)."""

    @abstractmethod
    def find_path(
        self, game_state: GameState, start_piece: Piece, target_piece: Piece
    ) -> list[Move]:
        """Moves from ``start_piece`` to ``target_piece``, empty if there is no way."""

    @abstractmethod
    def can_place_piece(self, game_state: GameState, piece: Piece) -> bool:
        """Whether ``piece`` lies on the board without overlapping filled cells."""
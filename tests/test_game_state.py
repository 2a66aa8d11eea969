import pytest

from tetrikit.game_state import GameState
from tetrikit.move import Move, MoveType
from tetrikit.pieces import PieceState, PieceType, Position, Rotation
from tetrikit.srs import SRS

WIDTH = 10
HEIGHT = 40


@pytest.fixture
def game():
    state = GameState(WIDTH, HEIGHT, SRS())
    assert state.spawn_piece(PieceType.T)
    return state


def test_spawn_without_rotation_system_raises():
    state = GameState(WIDTH, HEIGHT)
    with pytest.raises(RuntimeError):
        state.spawn_piece(PieceType.T)


def test_spawn_uses_initial_state(game):
    assert game.current_piece.state == SRS().initial_state(PieceType.T, WIDTH, HEIGHT)
    assert game.game_over is False


def test_translations(game):
    start = game.current_piece.state.position
    assert game.apply_move(Move(MoveType.LEFT))
    assert game.current_piece.state.position == Position(start.x - 1, start.y)
    assert game.apply_move(Move(MoveType.RIGHT))
    assert game.apply_move(Move(MoveType.RIGHT))
    assert game.current_piece.state.position == Position(start.x + 1, start.y)
    assert game.apply_move(Move(MoveType.UP))
    assert game.apply_move(Move(MoveType.SOFT_DROP))
    assert game.apply_move(Move(MoveType.DOWN))
    assert game.current_piece.state.position == Position(start.x + 1, start.y - 1)


def test_left_until_wall(game):
    moves = 0
    while game.apply_move(Move(MoveType.LEFT)):
        moves += 1
    assert moves > 0
    cells = game.current_piece.absolute_filled_cells()
    assert min(c.x for c in cells) == 0
    assert game.is_valid_state(game.current_piece.state)


def test_hard_drop_lands(game):
    assert game.apply_move(Move(MoveType.HARD_DROP))
    state = game.current_piece.state
    assert game.is_valid_state(state)
    below = Position(state.position.x, state.position.y - 1)
    assert game.check_collision(state, below)
    assert min(c.y for c in game.current_piece.absolute_filled_cells()) == 0


def test_lock_fills_board(game):
    game.apply_move(Move(MoveType.HARD_DROP))
    cells = game.current_piece.absolute_filled_cells()
    assert game.lock_current_piece() == 0
    assert game.board.filled_cell_count == len(cells)
    assert all(game.board.is_filled(c.x, c.y) for c in cells)


def test_rotation_without_kick(game):
    start = game.current_piece.state.position
    assert game.apply_move(Move(MoveType.ROTATE_CLOCKWISE))
    assert game.current_piece.state.rotation == Rotation.R90
    assert game.current_piece.state.position == start
    assert game.apply_move(Move(MoveType.ROTATE_COUNTER_CLOCKWISE))
    assert game.current_piece.state.rotation == Rotation.R0
    assert game.apply_move(Move(MoveType.ROTATE_180))
    assert game.current_piece.state.rotation == Rotation.R180


def test_rotation_with_kick(game):
    start = game.current_piece.state.position
    kicks = SRS().clockwise_wall_kicks(PieceType.T, Rotation.R0)
    assert game.apply_move(Move(MoveType.ROTATE_CLOCKWISE, 1))
    assert game.current_piece.state.position == start + kicks.offset(1).to_position()


def test_rotation_kick_index_out_of_range_ignored(game):
    start = game.current_piece.state.position
    assert game.apply_move(Move(MoveType.ROTATE_CLOCKWISE, 10))
    assert game.current_piece.state.position == start


def test_moves_rejected_after_game_over(game):
    game.game_over = True
    before = game.current_piece.state
    assert game.apply_move(Move(MoveType.LEFT)) is False
    assert game.current_piece.state == before


def test_invalid_state_off_board(game):
    state = PieceState(PieceType.T, Position(-5, 0), Rotation.R0)
    assert game.is_valid_state(state) is False


def test_spawn_next_piece_empty_queue(game):
    assert game.spawn_next_piece() is False


def test_spawn_next_piece_consumes_queue(game):
    game.next_pieces.extend([PieceType.O, PieceType.I])
    assert game.spawn_next_piece()
    assert game.current_piece.state.piece_type == PieceType.O
    assert list(game.next_pieces) == [PieceType.I]


def test_hold_without_queue_fails(game):
    assert game.apply_move(Move(MoveType.HOLD)) is False
    assert game.held_piece is None
    assert game.hold_used is False


def test_hold_and_swap(game):
    game.next_pieces.append(PieceType.I)
    assert game.apply_move(Move(MoveType.HOLD))
    assert game.held_piece == PieceType.T
    assert game.current_piece.state.piece_type == PieceType.I
    assert game.hold_used
    assert game.apply_move(Move(MoveType.HOLD)) is False

    game.apply_move(Move(MoveType.HARD_DROP))
    game.lock_current_piece()
    assert game.hold_used is False
    game.spawn_piece(PieceType.O)
    assert game.hold_current_piece()
    assert game.held_piece == PieceType.O
    assert game.current_piece.state.piece_type == PieceType.T


def test_line_clear():
    state = GameState(WIDTH, HEIGHT, SRS())
    assert state.spawn_piece(PieceType.I)
    cells = state.current_piece.absolute_filled_cells()
    columns = {c.x for c in cells}
    for x in range(WIDTH):
        if x not in columns:
            state.board.fill_cell(x, 0)
    assert state.apply_move(Move(MoveType.HARD_DROP))
    assert state.lock_current_piece() == 1
    assert state.lines_cleared == 1
    assert state.board.filled_cell_count == 0


def test_blocked_spawn_ends_game():
    state = GameState(WIDTH, HEIGHT, SRS())
    spawn = SRS().initial_state(PieceType.T, WIDTH, HEIGHT)
    state.spawn_piece(PieceType.T)
    for cell in state.current_piece.absolute_filled_cells():
        state.board.fill_cell(cell.x, cell.y)
    assert state.spawn_piece(PieceType.T) is False
    assert state.game_over
    assert state.current_piece.state == spawn


def test_clone_is_independent(game):
    game.next_pieces.append(PieceType.S)
    copy = game.clone()
    before = copy.current_piece.state
    game.apply_move(Move(MoveType.LEFT))
    game.board.fill_cell(0, 0)
    game.next_pieces.clear()
    assert copy.current_piece.state == before
    assert copy.board.is_filled(0, 0) is False
    assert list(copy.next_pieces) == [PieceType.S]
    assert copy.rotation_system is game.rotation_system


def test_str(game):
    game.next_pieces.extend([PieceType.I, PieceType.O])
    text = str(game)
    assert text.startswith("Game State:\n")
    assert f"  Board: {WIDTH}x{HEIGHT}\n" in text
    assert "  Current Piece: T\n" in text
    assert "  Held Piece: None\n" in text
    assert "  Hold Used: No\n" in text
    assert "  Next Pieces: I O \n" in text
    assert "  Game Over: No\n" in text


def test_invalid_board_size():
    with pytest.raises(ValueError):
        GameState(2, 2, SRS())
"""Fixed Connect4 dimensions and piece encoding."""

ROW_SIZE = 6
COLUMN_SIZE = 7
PIECE_COUNT_TO_WIN = 4

EMPTY = 0
PLAYER_ONE_PIECE = 1
PLAYER_TWO_PIECE = 2

PIECES = (PLAYER_ONE_PIECE, PLAYER_TWO_PIECE)
CELL_VALUES = (EMPTY, PLAYER_ONE_PIECE, PLAYER_TWO_PIECE)

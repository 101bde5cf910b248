"""Line scanning for win detection and the longest-run heuristic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, List

import numpy as np

from .constants import EMPTY, PIECE_COUNT_TO_WIN, PIECES, ROW_SIZE, COLUMN_SIZE

LINE_FAMILIES = ("vertical", "horizontal", "diagonal", "anti_diagonal")


@dataclass(frozen=True)
class Attempt:
    """Longest contiguous run found for ``piece``."""

    piece: int
    contiguous_count: int


@dataclass(frozen=True)
class BoardScan:
    winners: FrozenSet[int]
    longest_runs: Dict[int, int]

    def attempt(self, piece: int) -> Attempt:
        return Attempt(piece, self.longest_runs.get(piece, 0))


def iter_lines(cells: np.ndarray, family: str) -> Iterator[List[int]]:
    """
    Yield every line of ``family`` that is long enough to hold a win.

    Diagonals are indexed by ``offset`` in ``-(ROW_SIZE - 1) .. COLUMN_SIZE - 1``
    (``ROW_SIZE + COLUMN_SIZE - 1`` diagonals per direction); anti-diagonals
    are the diagonals of the left-right mirrored grid.
    """
    if family == "vertical":
        lines = list(cells.T)
    elif family == "horizontal":
        lines = list(cells)
    elif family == "diagonal":
        lines = [np.diagonal(cells, k) for k in range(-(ROW_SIZE - 1), COLUMN_SIZE)]
    elif family == "anti_diagonal":
        mirrored = np.fliplr(cells)
        lines = [np.diagonal(mirrored, k) for k in range(-(ROW_SIZE - 1), COLUMN_SIZE)]
    else:
        raise ValueError(f"Unknown line family: {family}")

    for line in lines:
        if len(line) >= PIECE_COUNT_TO_WIN:
            yield line.tolist()


def _scan_line(line: List[int], longest: Dict[int, int], winners: set) -> None:
    """
    Record every maximal run of one piece along ``line``.

    A run counts whether it ends at an empty cell, an opposing piece or the
    end of the line, so a run touching the board edge is included in
    ``longest``. Runs never continue from one line into the next.
    """
    run_piece = EMPTY
    run_length = 0
    # Trailing EMPTY closes a run that reaches the edge.
    for value in line + [EMPTY]:
        if value != EMPTY and value == run_piece:
            run_length += 1
            continue
        if run_piece != EMPTY:
            if run_length >= PIECE_COUNT_TO_WIN:
                winners.add(run_piece)
            if run_length > longest[run_piece]:
                longest[run_piece] = run_length
        run_piece = value
        run_length = 0 if value == EMPTY else 1


def scan_board(cells: np.ndarray) -> BoardScan:
    """Walk all four line families and collect winners and longest runs."""
    longest = {piece: 0 for piece in PIECES}
    winners: set = set()
    for family in LINE_FAMILIES:
        for line in iter_lines(cells, family):
            _scan_line(line, longest, winners)
    return BoardScan(winners=frozenset(winners), longest_runs=longest)

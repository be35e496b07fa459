from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

CountArray = NDArray[np.int16]

NUM_PITS = 12
PITS_PER_SIDE = 6
SEEDS_PER_PIT = 4
TOTAL_SEEDS = NUM_PITS * SEEDS_PER_PIT


class Side(IntEnum):
    A = 0
    B = 1

    def other(self) -> "Side":
        return Side.B if self is Side.A else Side.A


class GameResult(Enum):
    ONGOING = "ongoing"
    PLAYER_A_WIN = "player_a_win"
    PLAYER_B_WIN = "player_b_win"
    DRAW = "draw"


class Seed:
    """A single unit of game material. Seeds are fungible and carry no state."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "Seed()"


class Pit:
    def __init__(self, seeds: int = SEEDS_PER_PIT) -> None:
        if seeds < 0:
            raise ValueError("A pit cannot hold a negative number of seeds.")
        self._seeds: List[Seed] = [Seed() for _ in range(seeds)]

    @property
    def count(self) -> int:
        return len(self._seeds)

    def add(self, seed: Seed) -> None:
        self._seeds.append(seed)

    def take_all(self) -> List[Seed]:
        taken = list(self._seeds)
        self._seeds.clear()
        return taken

    def clear(self) -> None:
        self._seeds.clear()

    def __repr__(self) -> str:
        return f"Pit(seeds={self.count})"


class Board:
    def __init__(self, pits: Optional[Sequence[Pit]] = None) -> None:
        if pits is None:
            pits = [Pit() for _ in range(NUM_PITS)]
        if len(pits) != NUM_PITS:
            raise ValueError(f"Board requires exactly {NUM_PITS} pits, got {len(pits)}.")
        self._pits: Tuple[Pit, ...] = tuple(pits)

    @classmethod
    def from_counts(cls, counts: Iterable[int]) -> "Board":
        values = [int(value) for value in counts]
        if len(values) != NUM_PITS:
            raise ValueError(f"Board requires exactly {NUM_PITS} counts, got {len(values)}.")
        return cls([Pit(value) for value in values])

    def pit_at(self, index: int) -> Pit:
        if not 0 <= index < NUM_PITS:
            raise IndexError(f"Pit index {index} out of range.")
        return self._pits[index]

    def deep_copy(self) -> "Board":
        # Fresh Pit and Seed objects; nothing is shared with self.
        return Board([Pit(pit.count) for pit in self._pits])

    def counts(self) -> CountArray:
        return np.array([pit.count for pit in self._pits], dtype=np.int16)

    def total_seeds(self) -> int:
        return sum(pit.count for pit in self._pits)

    def side_empty(self, start: int, end: int) -> bool:
        return all(self._pits[i].count == 0 for i in range(start, end + 1))

    def __len__(self) -> int:
        return NUM_PITS

    def __repr__(self) -> str:
        return f"Board({self.counts().tolist()})"


@dataclass
class Player:
    name: str
    is_ai: bool
    pit_start: int
    pit_end: int
    score: int = 0

    def owns(self, index: int) -> bool:
        return self.pit_start <= index <= self.pit_end

    def pit_indices(self) -> range:
        return range(self.pit_start, self.pit_end + 1)

    def absolute_index(self, pit: int) -> int:
        return self.pit_start + pit

    def add_score(self, points: int) -> None:
        if points < 0:
            raise ValueError("Score can only increase.")
        self.score += points


@dataclass(frozen=True)
class MoveRecord:
    side: Side
    pit: int
    source: int
    landing: int
    sown: int
    captured: int = 0
    captured_pits: Tuple[int, ...] = field(default_factory=tuple)


@dataclass
class GameState:
    board: Board
    players: Tuple[Player, Player]
    current: Side = Side.A
    result: GameResult = GameResult.ONGOING
    ply_count: int = 0
    last_move: Optional[MoveRecord] = None

    def __post_init__(self) -> None:
        _check_sides(self.players)

    def copy(self) -> "GameState":
        return GameState(
            board=self.board.deep_copy(),
            players=tuple(
                Player(p.name, p.is_ai, p.pit_start, p.pit_end, p.score) for p in self.players
            ),
            current=self.current,
            result=self.result,
            ply_count=self.ply_count,
            last_move=self.last_move,
        )

    @property
    def current_player(self) -> Player:
        return self.players[int(self.current)]

    @property
    def opponent(self) -> Player:
        return self.players[int(self.current.other())]

    @property
    def is_terminal(self) -> bool:
        return self.result != GameResult.ONGOING

    def scores(self) -> Tuple[int, int]:
        return (self.players[0].score, self.players[1].score)

    def seeds_in_play(self) -> int:
        return self.board.total_seeds() + sum(self.scores())

    def __repr__(self) -> str:
        return (
            f"GameState(current={self.current.name}, result={self.result}, ply={self.ply_count}, "
            f"scores={self.scores()})\n{self.board.counts().tolist()}"
        )


def _check_sides(players: Sequence[Player]) -> None:
    if len(players) != 2:
        raise ValueError("Exactly two players are required.")
    owned: List[int] = []
    for player in players:
        if player.pit_end - player.pit_start + 1 != PITS_PER_SIDE:
            raise ValueError(f"{player.name} must own exactly {PITS_PER_SIDE} pits.")
        owned.extend(player.pit_indices())
    if sorted(owned) != list(range(NUM_PITS)):
        raise ValueError("Player ranges must split the board into two disjoint halves.")

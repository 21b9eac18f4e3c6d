from __future__ import annotations
import logging
from enum import Enum
from typing import Iterable

from boxgame.boxes.box_set import BoxSet
from boxgame.constants import PLAYERS
from boxgame.rules.player import Player
from boxgame.state import GameResult, TurnRecord

logger = logging.getLogger(__name__)


class Phase(Enum):
    SETUP = "setup"
    PLAYING = "playing"
    FINISHED = "finished"


class GameFinishedError(RuntimeError):
    """Raised when a turn is requested after the last token was used."""


class GameEngine:
    """
    One game over a fixed token sequence. Players alternate starting
    with A; each turn feeds the next token to the currently lightest box.
    SETUP -> PLAYING on the first token, PLAYING -> FINISHED once every
    token is used. There is no way back.
    """

    def __init__(self, tokens: Iterable[float]):
        self._tokens = tuple(tokens)
        self._cursor = 0
        self.box_set = BoxSet.standard()
        self.players = tuple(Player(name) for name in PLAYERS)
        self.phase = Phase.SETUP
        self._turns: list[TurnRecord] = []

    @property
    def remaining(self) -> int:
        return len(self._tokens) - self._cursor

    @property
    def scores(self) -> tuple[float, float]:
        a, b = self.players
        return (a.score, b.score)

    def step(self) -> TurnRecord:
        if self.phase is Phase.FINISHED or self.remaining == 0:
            self.phase = Phase.FINISHED
            raise GameFinishedError("no tokens left to play")
        self.phase = Phase.PLAYING

        turn = self._cursor
        token = self._tokens[turn]
        player = self.players[turn % len(self.players)]
        idx, result = player.take_turn(token, self.box_set)
        box = self.box_set[idx]
        rec = TurnRecord(
            turn=turn, player=player.name, token=token,
            box_index=idx, box_kind=box.kind, box_weight=box.weight,
            result=result, player_score=player.score,
        )
        self._turns.append(rec)
        self._cursor += 1
        logger.debug("turn %d: player %s token=%s box=%d (%s) result=%s",
                     turn, player.name, token, idx, box.kind, result)

        if self.remaining == 0:
            self.phase = Phase.FINISHED
        return rec

    def run(self) -> GameResult:
        while self.phase is not Phase.FINISHED and self.remaining > 0:
            self.step()
        self.phase = Phase.FINISHED
        a, b = self.scores
        logger.info("game finished after %d turns: A=%g B=%g", len(self._turns), a, b)
        return GameResult(score_a=a, score_b=b, turns=tuple(self._turns))


def play_game(tokens: Iterable[float]) -> GameResult:
    return GameEngine(tokens).run()

def play(tokens: Iterable[float]) -> tuple[float, float]:
    """Play one game and return (score A, score B)."""
    return play_game(tokens).as_pair()

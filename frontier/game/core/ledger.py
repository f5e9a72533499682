"""Player score tracking."""

from __future__ import annotations

from dataclasses import dataclass, field

from frontier.game.core.models import TURN_ORDER, PlayerId


@dataclass(slots=True)
class PlayerRecord:
    """A player and the largest value among the cells it owns."""

    player: PlayerId
    score: int = 0


@dataclass(slots=True)
class ScoreLedger:
    """Scores for exactly two players."""

    records: dict[PlayerId, PlayerRecord] = field(
        default_factory=lambda: {player: PlayerRecord(player) for player in TURN_ORDER}
    )

    @classmethod
    def with_scores(cls, scores: dict[PlayerId, int]) -> ScoreLedger:
        ledger = cls()
        for player, score in scores.items():
            ledger.records[player].score = score
        return ledger

    def score_of(self, player: PlayerId) -> int:
        return self.records[player].score

    def scores(self) -> dict[PlayerId, int]:
        return {player: self.records[player].score for player in TURN_ORDER}

    def update_score(self, player: PlayerId, claimed_value: int) -> int:
        """Raise ``player``'s score to ``claimed_value`` if larger; return the score."""
        record = self.records[player]
        record.score = max(record.score, claimed_value)
        return record.score

    def winner(self) -> PlayerId:
        """Return the strictly higher scorer; player one wins ties."""
        if self.score_of(PlayerId.TWO) > self.score_of(PlayerId.ONE):
            return PlayerId.TWO
        return PlayerId.ONE

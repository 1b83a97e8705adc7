from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringPolicy:
    """Points for a correct guess, reduced per earlier miss down to a floor."""

    base: int = 100
    penalty: int = 10
    floor: int = 10

    def points(self, attempts: int) -> int:
        if attempts < 0:
            raise ValueError(f"attempts must be non-negative, got {attempts}")
        return max(self.base - attempts * self.penalty, self.floor)

    @classmethod
    def from_config(cls, config) -> 'ScoringPolicy':
        return cls(
            base=int(config.get('POINTS_BASE', 100)),
            penalty=int(config.get('POINTS_PENALTY', 10)),
            floor=int(config.get('POINTS_FLOOR', 10)),
        )


DEFAULT_POLICY = ScoringPolicy()

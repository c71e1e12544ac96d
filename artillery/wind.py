"""Wind model: a direction and an intensity re-rolled every turn."""
import random
from dataclasses import dataclass

from artillery.constants import WIND_COEFFICIENT, WIND_MAX_INTENSITY


@dataclass
class Wind:
    direction: int = 1       # +1 pushes right, -1 pushes left
    intensity: float = 0.0   # in [0, WIND_MAX_INTENSITY)

    def reroll(self, rng: random.Random) -> None:
        self.intensity = rng.random() * WIND_MAX_INTENSITY
        self.direction = 1 if rng.random() > 0.5 else -1

    @property
    def drift(self) -> float:
        """Horizontal displacement added to a projectile each tick."""
        return self.intensity * self.direction * WIND_COEFFICIENT

    @property
    def arrow(self) -> str:
        return "→" if self.direction > 0 else "←"

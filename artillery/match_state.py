"""Match state shared between the frame loop, the renderer and the API."""
import threading
from dataclasses import dataclass, field
from typing import List, Optional

from artillery.constants import MatchPhase
from artillery.obstacles import ObstacleField
from artillery.tank import Projectile, Tank
from artillery.wind import Wind


@dataclass
class MatchState:
    """Everything one match needs. Mutated only by MatchController."""
    tanks: List[Tank]
    obstacles: ObstacleField = field(default_factory=ObstacleField)
    wind: Wind = field(default_factory=Wind)
    projectile: Optional[Projectile] = None
    active_index: int = 0
    phase: MatchPhase = MatchPhase.IN_PROGRESS
    winner: Optional[str] = None
    tick: int = 0
    turn: int = 0
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    @property
    def active(self) -> Tank:
        return self.tanks[self.active_index]

    @property
    def target(self) -> Tank:
        return self.tanks[1 - self.active_index]

    @property
    def finished(self) -> bool:
        return self.phase == MatchPhase.FINISHED

    @property
    def in_flight(self) -> bool:
        return self.projectile is not None

    def swap_players(self) -> None:
        self.active_index = 1 - self.active_index

    def snapshot(self) -> dict:
        """Return a JSON-serializable dictionary of the full match state."""
        with self.lock:
            return {
                "phase": self.phase.value,
                "tick": self.tick,
                "turn": self.turn,
                "active": self.active.color,
                "target": self.target.color,
                "tanks": [t.to_dict() for t in self.tanks],
                "obstacles": self.obstacles.to_dicts(),
                "projectile": self.projectile.to_dict() if self.projectile else None,
                "wind": {
                    "direction": self.wind.direction,
                    "intensity": round(self.wind.intensity, 3),
                },
                "winner": self.winner,
            }

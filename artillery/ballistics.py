"""Projectile step and collision checks for a single ballistics tick.

Checks run in a fixed priority order and the first one that matches ends
the tick:

    ground  >  target tank  >  obstacles

Only the target (non-active) tank is tested, so a shell can never damage
the tank that fired it. Obstacles are scanned as a snapshot in insertion
order and at most one is removed per tick, after the scan completes.
"""
from dataclasses import dataclass
from typing import Optional

from artillery.constants import PLAYFIELD_HEIGHT, HIT_DAMAGE, ShotOutcome
from artillery.obstacles import Obstacle, ObstacleField
from artillery.tank import Projectile, Tank
from artillery.wind import Wind


@dataclass
class ShotResult:
    """What happened to the projectile during one tick."""
    outcome: ShotOutcome
    x: float
    y: float
    damage: int = 0
    obstacle: Optional[Obstacle] = None
    # Filled in by the controller: match tick and the turn the shot belongs to
    tick: int = 0
    turn: int = 0

    @property
    def resolved(self) -> bool:
        return self.outcome != ShotOutcome.IN_FLIGHT

    def to_dict(self) -> dict:
        return {
            "outcome": self.outcome.value,
            "x": round(self.x, 1),
            "y": round(self.y, 1),
            "damage": self.damage,
            "tick": self.tick,
            "turn": self.turn,
            "obstacle": self.obstacle.to_dict() if self.obstacle else None,
        }


def step_projectile(projectile: Projectile, wind: Wind, target: Tank,
                    obstacles: ObstacleField,
                    floor_y: float = PLAYFIELD_HEIGHT) -> ShotResult:
    """Advance the projectile one tick and apply whatever it collides with.

    Mutates the projectile, the target's health and the obstacle field.
    Clearing the projectile and switching turns is left to the caller.
    """
    projectile.update(wind)
    px, py = projectile.x, projectile.y

    if py > floor_y:
        return ShotResult(ShotOutcome.GROUND, px, py)

    if target.contains(px, py):
        target.take_damage(HIT_DAMAGE)
        outcome = ShotOutcome.TANK_HIT if target.alive else ShotOutcome.FATAL_HIT
        return ShotResult(outcome, px, py, damage=HIT_DAMAGE)

    hit = obstacles.first_hit(px, py)
    if hit is not None:
        obstacles.remove(hit)
        return ShotResult(ShotOutcome.OBSTACLE_HIT, px, py, obstacle=hit)

    return ShotResult(ShotOutcome.IN_FLIGHT, px, py)

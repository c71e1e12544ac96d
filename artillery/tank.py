import math
from typing import Tuple

from artillery.constants import (
    TANK_WIDTH, TANK_HEIGHT, TANK_GROUND_Y, TURRET_LENGTH,
    ANGLE_MIN, ANGLE_MAX, POWER_MIN, POWER_MAX,
    TANK_MAX_HEALTH, HIT_DAMAGE, GRAVITY, POWER_TO_VELOCITY,
)
from artillery.wind import Wind


class Projectile:
    def __init__(self, x: float, y: float, vx: float, vy: float) -> None:
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy

    def update(self, wind: Wind) -> None:
        # Position uses this tick's velocity; gravity applies afterwards
        self.x += self.vx + wind.drift
        self.y += self.vy
        self.vy += GRAVITY

    def to_dict(self) -> dict:
        return {
            "x": round(self.x, 1),
            "y": round(self.y, 1),
            "vx": round(self.vx, 3),
            "vy": round(self.vy, 3),
        }


class Tank:
    def __init__(self, x: float, angle: float, power: float, color: str,
                 y: float = TANK_GROUND_Y) -> None:
        self.x = x
        self.y = y  # top-left corner; tanks sit on the ground
        self.angle = angle  # degrees, 0=right, 90=up, 180=left
        self.power = power
        self.color = color
        self.health: int = TANK_MAX_HEALTH

    @property
    def alive(self) -> bool:
        return self.health > 0

    def clamp_controls(self) -> None:
        self.angle = max(ANGLE_MIN, min(ANGLE_MAX, self.angle))
        self.power = max(POWER_MIN, min(POWER_MAX, self.power))

    def muzzle_origin(self) -> Tuple[float, float]:
        return self.x + TANK_WIDTH / 2, self.y

    def turret_tip(self) -> Tuple[float, float]:
        ox, oy = self.muzzle_origin()
        rad = math.radians(self.angle)
        return ox + math.cos(rad) * TURRET_LENGTH, oy - math.sin(rad) * TURRET_LENGTH

    def launch(self) -> Projectile:
        """Build a projectile leaving the turret base at the current aim."""
        rad = math.radians(self.angle)
        ox, oy = self.muzzle_origin()
        return Projectile(
            ox, oy,
            self.power * math.cos(rad) * POWER_TO_VELOCITY,
            -self.power * math.sin(rad) * POWER_TO_VELOCITY,
        )

    def contains(self, px: float, py: float) -> bool:
        return (self.x < px < self.x + TANK_WIDTH
                and self.y < py < self.y + TANK_HEIGHT)

    def take_damage(self, amount: int = HIT_DAMAGE) -> None:
        # Not clamped: health may go below zero before the win check
        self.health -= amount

    def to_dict(self) -> dict:
        return {
            "color": self.color,
            "x": round(self.x, 1),
            "y": round(self.y, 1),
            "angle": self.angle,
            "power": self.power,
            "health": self.health,
            "alive": self.alive,
        }

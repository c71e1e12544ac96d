import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from artillery.constants import (
    PLAYFIELD_WIDTH, PLAYFIELD_HEIGHT,
    OBSTACLE_COUNT, OBSTACLE_EDGE_MARGIN,
    OBSTACLE_BAND_HEIGHT, OBSTACLE_GROUND_OFFSET,
    OBSTACLE_MIN_WIDTH, OBSTACLE_MAX_WIDTH,
    OBSTACLE_MIN_HEIGHT, OBSTACLE_MAX_HEIGHT,
)


@dataclass
class Obstacle:
    x: float
    y: float
    width: float
    height: float

    def contains(self, px: float, py: float) -> bool:
        # Strict on every edge: a point on the border is a miss
        return (self.x < px < self.x + self.width
                and self.y < py < self.y + self.height)

    def to_dict(self) -> dict:
        return {
            "x": round(self.x, 1),
            "y": round(self.y, 1),
            "width": round(self.width, 1),
            "height": round(self.height, 1),
        }


@dataclass
class ObstacleField:
    obstacles: List[Obstacle] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.obstacles)

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self.obstacles)

    def __contains__(self, obstacle: Obstacle) -> bool:
        return any(o is obstacle for o in self.obstacles)

    def first_hit(self, px: float, py: float) -> Optional[Obstacle]:
        """Return the first obstacle (insertion order) containing the point."""
        for obs in list(self.obstacles):
            if obs.contains(px, py):
                return obs
        return None

    def remove(self, obstacle: Obstacle) -> None:
        # Identity, not equality: two random rectangles may compare equal
        self.obstacles = [o for o in self.obstacles if o is not obstacle]

    def clear(self) -> None:
        self.obstacles = []

    def to_dicts(self) -> List[dict]:
        return [obs.to_dict() for obs in self.obstacles]


def random_obstacle(rng: random.Random,
                    width: int = PLAYFIELD_WIDTH,
                    height: int = PLAYFIELD_HEIGHT) -> Obstacle:
    """Place one obstacle away from the side edges, in a band above the ground."""
    return Obstacle(
        x=rng.random() * (width - 2 * OBSTACLE_EDGE_MARGIN) + OBSTACLE_EDGE_MARGIN,
        y=height - rng.random() * OBSTACLE_BAND_HEIGHT - OBSTACLE_GROUND_OFFSET,
        width=rng.random() * (OBSTACLE_MAX_WIDTH - OBSTACLE_MIN_WIDTH) + OBSTACLE_MIN_WIDTH,
        height=rng.random() * (OBSTACLE_MAX_HEIGHT - OBSTACLE_MIN_HEIGHT) + OBSTACLE_MIN_HEIGHT,
    )


def generate_obstacles(rng: random.Random,
                       count: int = OBSTACLE_COUNT,
                       width: int = PLAYFIELD_WIDTH,
                       height: int = PLAYFIELD_HEIGHT) -> ObstacleField:
    return ObstacleField([random_obstacle(rng, width, height) for _ in range(count)])

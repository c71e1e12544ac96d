"""Match history: commands received and shots resolved.

Thread-safe, bounded log written by the frame loop and read by the API's
``/log`` endpoint.
"""
import time
import threading
from collections import deque
from dataclasses import dataclass, asdict
from typing import Optional

from artillery.ballistics import ShotResult


@dataclass
class CommandLogEntry:
    """A single input command applied to the match."""
    timestamp: float
    tick: int
    player: str
    command: str


@dataclass
class ShotLogEntry:
    """A resolved shot: where it ended and what it did."""
    timestamp: float
    tick: int
    turn: int
    shooter: str
    outcome: str
    x: float
    y: float
    damage: int


class MatchHistory:
    """Thread-safe match history with bounded memory.

    Uses circular buffers (deques) so old entries are evicted when full.
    """

    def __init__(self, max_commands: int = 1000, max_shots: int = 200):
        self._commands = deque(maxlen=max_commands)
        self._shots = deque(maxlen=max_shots)
        self._lock = threading.Lock()

    def log_command(self, tick: int, player: str, command: str) -> None:
        entry = CommandLogEntry(
            timestamp=time.time(),
            tick=tick,
            player=player,
            command=command,
        )
        with self._lock:
            self._commands.append(entry)

    def log_shot(self, shooter: str, result: ShotResult) -> None:
        """Record a resolved shot.

        Args:
            shooter: Color of the tank that fired
            result: Outcome returned for the tick the projectile resolved on
        """
        entry = ShotLogEntry(
            timestamp=time.time(),
            tick=result.tick,
            turn=result.turn,
            shooter=shooter,
            outcome=result.outcome.value,
            x=round(result.x, 1),
            y=round(result.y, 1),
            damage=result.damage,
        )
        with self._lock:
            self._shots.append(entry)

    def clear(self) -> None:
        with self._lock:
            self._commands.clear()
            self._shots.clear()

    def get_history(
        self,
        since_tick: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> dict:
        """Get match history with optional filtering.

        Args:
            since_tick: Only return entries at or after this tick
            limit: Maximum number of entries to return per category

        Returns:
            Dictionary with commands, shots, and metadata
        """
        with self._lock:
            commands = list(self._commands)
            if since_tick is not None:
                commands = [c for c in commands if c.tick >= since_tick]
            if limit is not None:
                commands = commands[-limit:]

            shots = list(self._shots)
            if since_tick is not None:
                shots = [s for s in shots if s.tick >= since_tick]
            if limit is not None:
                shots = shots[-limit:]

            all_ticks = (
                [c.tick for c in self._commands]
                + [s.tick for s in self._shots]
            )
            oldest_tick = min(all_ticks) if all_ticks else 0
            newest_tick = max(all_ticks) if all_ticks else 0

            return {
                "commands": [asdict(c) for c in commands],
                "shots": [asdict(s) for s in shots],
                "total_commands": len(commands),
                "total_shots": len(shots),
                "oldest_tick": oldest_tick,
                "newest_tick": newest_tick,
            }

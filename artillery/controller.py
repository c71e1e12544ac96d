"""Turn controller: the only writer of a MatchState.

The host loop calls ``tick()`` once per frame at a fixed timestep and
forwards player input through ``apply_command()`` (or the individual
``adjust_aim`` / ``adjust_power`` / ``fire`` methods). Nothing here reads
the wall clock, so the same controller runs under pygame, in the headless
API loop, or in a test calling ``tick()`` directly.

Callbacks:
    on_shot_resolved(shooter_color, result) -- after every resolved shot,
        including the one that ends the match.
    on_match_end(winner_color) -- once, when the target's health drops
        to zero or below.
Both are invoked after the state lock is released.
"""
import random
from typing import Callable, List, Optional

from artillery.constants import (
    PLAYER_SPAWNS, AIM_STEP, POWER_STEP,
    MatchCommand, MatchPhase, ShotOutcome,
)
from artillery.ballistics import ShotResult, step_projectile
from artillery.match_state import MatchState
from artillery.obstacles import generate_obstacles
from artillery.tank import Tank
from artillery.wind import Wind


def spawn_tanks() -> List[Tank]:
    """Create player 1 and player 2 at their fixed ground positions."""
    return [
        Tank(x, angle, power, color)
        for x, angle, power, color in (PLAYER_SPAWNS[1], PLAYER_SPAWNS[2])
    ]


class MatchController:
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        on_match_end: Optional[Callable[[str], None]] = None,
        on_shot_resolved: Optional[Callable[[str, ShotResult], None]] = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.on_match_end = on_match_end
        self.on_shot_resolved = on_shot_resolved
        self.state = MatchState(tanks=spawn_tanks())
        self.new_match()

    # ---- Lifecycle ----

    def new_match(self) -> None:
        """Regenerate tanks, obstacles and wind in place.

        The MatchState object itself is kept so that readers holding a
        reference (renderer, API) see the fresh match.
        """
        with self.state.lock:
            s = self.state
            s.tanks = spawn_tanks()
            s.obstacles = generate_obstacles(self.rng)
            s.wind = Wind()
            s.projectile = None
            s.active_index = 0
            s.phase = MatchPhase.IN_PROGRESS
            s.winner = None
            s.tick = 0
            s.turn = 0

    # ---- Input ----

    def adjust_aim(self, delta: float) -> None:
        # Clamped on the next tick, not here
        with self.state.lock:
            self.state.active.angle += delta

    def adjust_power(self, delta: float) -> None:
        with self.state.lock:
            self.state.active.power += delta

    def fire(self) -> bool:
        """Launch a projectile from the active tank.

        Returns False without doing anything while a projectile is already
        in flight or after the match has finished.
        """
        with self.state.lock:
            s = self.state
            if s.finished:
                return False
            if s.in_flight:
                print(f"Tank {s.active.color} fire ignored: projectile already in flight")
                return False
            s.active.clamp_controls()
            s.projectile = s.active.launch()
            print(f"Tank {s.active.color} fired! angle={s.active.angle} power={s.active.power}")
            return True

    def apply_command(self, command: MatchCommand) -> None:
        if command == MatchCommand.RESTART:
            self.new_match()
            return
        if self.state.finished:
            return

        if command == MatchCommand.AIM_UP:
            self.adjust_aim(AIM_STEP)
        elif command == MatchCommand.AIM_DOWN:
            self.adjust_aim(-AIM_STEP)
        elif command == MatchCommand.POWER_DOWN:
            self.adjust_power(-POWER_STEP)
        elif command == MatchCommand.POWER_UP:
            self.adjust_power(POWER_STEP)
        elif command == MatchCommand.FIRE:
            self.fire()

    # ---- Frame update ----

    def clamp_controls(self) -> None:
        with self.state.lock:
            self.state.active.clamp_controls()

    def resolve_turn(self) -> None:
        """Destroy the projectile, hand the turn over and re-roll the wind."""
        with self.state.lock:
            s = self.state
            s.projectile = None
            s.swap_players()
            s.wind.reroll(self.rng)
            s.turn += 1
            print(f"Turn {s.turn}: {s.active.color} to play, "
                  f"wind {s.wind.intensity:.1f} {s.wind.arrow}")

    def tick(self) -> Optional[ShotResult]:
        """Advance the match by one frame.

        Returns the projectile's result for this frame, or None when no
        projectile was in flight or the match is already over.
        """
        with self.state.lock:
            s = self.state
            if s.finished:
                return None
            s.tick += 1
            self.clamp_controls()
            if s.projectile is None:
                return None

            shooter = s.active.color
            result = step_projectile(s.projectile, s.wind, s.target, s.obstacles)
            result.tick = s.tick
            result.turn = s.turn
            if not result.resolved:
                return result

            if result.outcome == ShotOutcome.FATAL_HIT:
                s.projectile = None
                s.phase = MatchPhase.FINISHED
                s.winner = shooter
                print(f"{shooter.upper()} Player Wins!")
            else:
                self.resolve_turn()

        if self.on_shot_resolved is not None:
            self.on_shot_resolved(shooter, result)
        if result.outcome == ShotOutcome.FATAL_HIT and self.on_match_end is not None:
            self.on_match_end(shooter)
        return result

import pygame

from artillery.constants import (
    PLAYFIELD_WIDTH, PLAYFIELD_HEIGHT,
    TANK_WIDTH, TANK_HEIGHT, TURRET_WIDTH, TANK_MAX_HEALTH,
    PROJECTILE_RADIUS, TANK_COLORS,
    COLOR_BACKGROUND, COLOR_GROUND, COLOR_OBSTACLE,
    COLOR_TURRET, COLOR_PROJECTILE, COLOR_TEXT,
)
from artillery.match_state import MatchState


class MatchRenderer:
    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self._hud_font = None
        self._wind_font = None

    def _fonts(self):
        if self._hud_font is None:
            self._hud_font = pygame.font.Font(None, 26)
            self._wind_font = pygame.font.Font(None, 22)
        return self._hud_font, self._wind_font

    def render(self, state: MatchState) -> None:
        with state.lock:
            self.screen.fill(COLOR_BACKGROUND)
            pygame.draw.line(self.screen, COLOR_GROUND,
                             (0, PLAYFIELD_HEIGHT - 1), (PLAYFIELD_WIDTH, PLAYFIELD_HEIGHT - 1), 2)
            for t in state.tanks:
                self._draw_tank(t)
            self._draw_obstacles(state)
            self._draw_projectile(state)
            self._draw_health_bars(state)
            self._draw_hud(state)
            self._draw_wind(state)
            if state.finished:
                self.render_game_over(state.winner or "???")

    def _draw_tank(self, tank) -> None:
        color = TANK_COLORS.get(tank.color, (120, 120, 120))
        pygame.draw.rect(self.screen, color, (tank.x, tank.y, TANK_WIDTH, TANK_HEIGHT))
        pygame.draw.line(self.screen, COLOR_TURRET,
                         tank.muzzle_origin(), tank.turret_tip(), TURRET_WIDTH)

    def _draw_obstacles(self, state: MatchState) -> None:
        for obs in state.obstacles:
            pygame.draw.rect(self.screen, COLOR_OBSTACLE,
                             (obs.x, obs.y, obs.width, obs.height))

    def _draw_projectile(self, state: MatchState) -> None:
        p = state.projectile
        if p is not None:
            pygame.draw.circle(self.screen, COLOR_PROJECTILE,
                               (int(p.x), int(p.y)), PROJECTILE_RADIUS)

    # ---- HUD ----

    def _draw_health_bars(self, state: MatchState) -> None:
        """Draw a health bar above each tank's turret."""
        for tank in state.tanks:
            bar_w = TANK_WIDTH
            bar_h = 4
            bar_x = tank.x
            bar_y = tank.y - 40
            pygame.draw.rect(self.screen, (60, 60, 60), (bar_x, bar_y, bar_w, bar_h))
            fill_w = int(bar_w * max(0, tank.health) / TANK_MAX_HEALTH)
            fill_color = (0, 200, 0) if tank.health > 25 else (200, 0, 0)
            pygame.draw.rect(self.screen, fill_color, (bar_x, bar_y, fill_w, bar_h))

    def _draw_hud(self, state: MatchState) -> None:
        hud_font, _ = self._fonts()
        t = state.active
        text = (f"Player: {t.color.upper()} | Angle: {t.angle} | "
                f"Power: {t.power} | Health: {t.health}")
        self.screen.blit(hud_font.render(text, True, COLOR_TEXT), (10, 14))

    def _draw_wind(self, state: MatchState) -> None:
        _, wind_font = self._fonts()
        text = f"Wind: {state.wind.intensity:.1f} {state.wind.arrow}"
        self.screen.blit(wind_font.render(text, True, COLOR_TEXT), (PLAYFIELD_WIDTH - 150, 16))

    # ---- Game Over ----

    def render_game_over(self, winner_color: str) -> None:
        """Overlay the winner banner on top of the current frame."""
        overlay = pygame.Surface((PLAYFIELD_WIDTH, PLAYFIELD_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))
        self.screen.blit(overlay, (0, 0))

        font = pygame.font.Font(None, 72)
        text = font.render(f"{winner_color.upper()} Player Wins!", True, (255, 255, 100))
        self.screen.blit(
            text, text.get_rect(center=(PLAYFIELD_WIDTH // 2, PLAYFIELD_HEIGHT // 2 - 30))
        )

        sub_font = pygame.font.Font(None, 32)
        hint = sub_font.render("Press ENTER for a new match, ESC to quit", True, (220, 220, 220))
        self.screen.blit(
            hint, hint.get_rect(center=(PLAYFIELD_WIDTH // 2, PLAYFIELD_HEIGHT // 2 + 40))
        )

"""Entry point: python -m artillery [--headless] [--api] [--seed N]

Modes:
    (default)    Window with keyboard controls
    --api        Also start the HTTP control API on a daemon thread
    --headless   Run without display; match controlled entirely via the API
    --seed N     Seed obstacle and wind generation

Keyboard controls:
    UP/DOWN     - increase / decrease angle
    LEFT/RIGHT  - decrease / increase power
    Space       - fire
    ENTER       - new match (after a win)
    ESC         - quit
"""

import os
import random
import sys
import threading
from queue import Queue, Empty

# Set dummy video driver BEFORE importing pygame when headless
if "--headless" in sys.argv:
    os.environ["SDL_VIDEODRIVER"] = "dummy"

import pygame

from artillery.constants import (
    PLAYFIELD_WIDTH, PLAYFIELD_HEIGHT, WINDOW_TITLE, FPS,
    API_HOST, API_PORT, MatchCommand,
)
from artillery.controller import MatchController
from artillery.match_history import MatchHistory
from artillery.match_api import run_match_api
from artillery.renderer import MatchRenderer

KEY_COMMANDS = {
    pygame.K_UP: MatchCommand.AIM_UP,
    pygame.K_DOWN: MatchCommand.AIM_DOWN,
    pygame.K_LEFT: MatchCommand.POWER_DOWN,
    pygame.K_RIGHT: MatchCommand.POWER_UP,
    pygame.K_SPACE: MatchCommand.FIRE,
}


def _apply(controller: MatchController, history: MatchHistory, cmd: MatchCommand) -> None:
    """Log and apply one command on the frame loop's thread."""
    state = controller.state
    if cmd == MatchCommand.RESTART:
        controller.apply_command(cmd)
        history.clear()
        return
    history.log_command(state.tick, state.active.color, cmd.value)
    controller.apply_command(cmd)


def _run(headless: bool = False, api: bool = False, seed=None) -> None:
    pygame.init()
    if headless:
        screen = pygame.display.set_mode((1, 1))
    else:
        screen = pygame.display.set_mode((PLAYFIELD_WIDTH, PLAYFIELD_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.key.set_repeat(200, 30)
    clock = pygame.time.Clock()

    def announce_winner(winner: str) -> None:
        if headless:
            print("[HEADLESS] Match over. POST /restart to play again.")

    history = MatchHistory()
    controller = MatchController(
        rng=random.Random(seed),
        on_match_end=announce_winner,
        on_shot_resolved=history.log_shot,
    )
    renderer = None if headless else MatchRenderer(screen)
    command_queue = Queue()

    if api or headless:
        api_thread = threading.Thread(
            target=run_match_api,
            args=(command_queue, controller.state, history, API_HOST, API_PORT),
            daemon=True,
        )
        api_thread.start()

    if headless:
        print(f"\n[HEADLESS] Match running. Send commands to http://localhost:{API_PORT}/command\n")

    running = True
    while running:
        # ---- Commands from the API thread ----
        while True:
            try:
                cmd = command_queue.get_nowait()
            except Empty:
                break
            _apply(controller, history, cmd)

        # ---- Event handling (GUI mode only) ----
        if headless:
            pygame.event.pump()  # Prevent pygame from freezing
        else:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_RETURN and controller.state.finished:
                        _apply(controller, history, MatchCommand.RESTART)
                    elif event.key in KEY_COMMANDS:
                        _apply(controller, history, KEY_COMMANDS[event.key])

        controller.tick()

        if not headless:
            renderer.render(controller.state)
            pygame.display.flip()
        clock.tick(FPS)

    pygame.quit()


def main():
    args = sys.argv[1:]
    headless = "--headless" in args
    api = "--api" in args
    seed = None
    if "--seed" in args:
        i = args.index("--seed")
        try:
            seed = int(args[i + 1])
        except (IndexError, ValueError):
            print("--seed expects an integer")
            sys.exit(1)

    _run(headless=headless, api=api, seed=seed)


if __name__ == "__main__":
    main()

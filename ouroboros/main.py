#!/usr/bin/env python3
"""
OUROBOROS - Terminal Snake Survival
====================================
Hold out against endless serpents with weapons that fight on their own.

Controls:
    WASD / ARROWS - Move
    1-3           - Pick a level-up choice
    R             - Restart (game over screen)
    F             - Toggle FPS display
    Q/ESC         - Quit
"""

import argparse
import logging
import random
import sys
import time

try:
    from blessed import Terminal
except ImportError:
    print("ERROR: 'blessed' library required. Install with: pip install blessed")
    sys.exit(1)

from .components import Mode
from .config import FRAME_TIME, MAX_STEPS_PER_FRAME, MIN_WIDTH, MIN_HEIGHT
from .engine import Engine
from .hud import render_ui, render_title_screen, render_level_up, render_game_over_screen
from .log import setup_logging
from .player import InputHandler
from .render import GameRenderer

logger = logging.getLogger(__name__)


# =============================================================================
# GAME STATE
# =============================================================================

class GameState:
    """Terminal shell around one engine: input, screens and frame output."""

    def __init__(self, term: Terminal, show_fps: bool = False, seed=None):
        self.term = term
        self.renderer = GameRenderer(term, show_fps=show_fps)
        self.input_handler = InputHandler()
        self.engine = Engine(
            surface=self.renderer,
            on_level_up=self._on_level_up,
            on_game_over=self._on_game_over,
            rng=random.Random(seed),
        )
        self.phase_frame = 0
        self.running = True

    def _on_level_up(self):
        self.phase_frame = 0

    def _on_game_over(self):
        self.phase_frame = 0
        snap = self.engine.snapshot()
        logger.info('Game over at t=%.1fs, level %d, %d weapon kinds',
                    snap.game_time, snap.level, len(snap.weapons))

    def update(self):
        """Advance one fixed step."""
        self.phase_frame += 1
        self.input_handler.update()
        dx, dy = self.input_handler.get_movement_vector()
        self.engine.set_movement_intent(dx, dy)
        self.engine.step(FRAME_TIME)

    def render(self):
        self.renderer.begin_frame()
        mode = self.engine.mode

        if mode is Mode.MENU:
            render_title_screen(self.renderer, self.phase_frame)
        elif mode is Mode.GAMEOVER:
            render_game_over_screen(self.renderer, self.engine.snapshot(), self.phase_frame)
        else:
            # Level-up keeps the frozen world visible under the overlay
            self.engine.draw()
            render_ui(self.renderer, self.engine.snapshot())
            if mode is Mode.LEVELUP:
                render_level_up(self.renderer, self.engine.level_up_choices,
                                self.phase_frame)

        output = self.renderer.end_frame()
        if output:
            print(output, end='', flush=True)

    def handle_input(self):
        """Drain all pending input from the terminal."""
        key = self.term.inkey(timeout=0)
        while key:
            self.input_handler.process_key(key)
            key = self.term.inkey(timeout=0)

        handler = self.input_handler
        mode = self.engine.mode

        if handler.consume_quit():
            self.engine.stop()
            self.running = False
            return

        if handler.consume_toggle_fps():
            self.renderer.show_fps = not self.renderer.show_fps

        choice = handler.consume_choice()
        restart = handler.consume_restart()
        confirm = handler.consume_confirm()

        if mode is Mode.MENU and confirm:
            self.phase_frame = 0
            self.engine.start()
        elif mode is Mode.LEVELUP and choice is not None:
            if choice < len(self.engine.level_up_choices):
                self.engine.choose_upgrade(self.engine.level_up_choices[choice])
        elif mode is Mode.GAMEOVER and restart:
            self.phase_frame = 0
            self.engine.restart()


# =============================================================================
# MAIN LOOP
# =============================================================================

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Terminal snake survival")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING"])
    parser.add_argument("--log-file", type=str, default=None,
                        help="Write log records here (the screen is never used)")
    parser.add_argument("--show-fps", action="store_true")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for gameplay randomness")
    return parser


def main(argv=None):
    """Entry point. Sets up terminal and runs the 60 FPS game loop."""
    args = _build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    term = Terminal()

    if term.width < MIN_WIDTH or term.height < MIN_HEIGHT:
        print(
            f'Terminal too small: {term.width}x{term.height}. '
            f'Minimum: {MIN_WIDTH}x{MIN_HEIGHT}'
        )
        sys.exit(1)

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        game = GameState(term, show_fps=args.show_fps, seed=args.seed)
        logger.info('Terminal %dx%d, seed %s', term.width, term.height, args.seed)

        last_time = time.perf_counter()
        accumulator = 0.0
        fps_timer = 0.0
        fps_frame_count = 0

        # Initial clear (only time we clear the whole screen)
        print(term.home + term.clear, end='', flush=True)

        while game.running:
            now = time.perf_counter()
            delta = now - last_time
            last_time = now

            # Clamp delta to prevent spiral of death
            delta = min(delta, FRAME_TIME * 5)

            accumulator += delta
            fps_timer += delta

            game.handle_input()
            if not game.running:
                break

            if (term.width, term.height) != (game.renderer.width, game.renderer.height):
                game.renderer.resize(term.width, term.height)
                print(term.home + term.clear, end='', flush=True)

            ticks = 0
            while accumulator >= FRAME_TIME and ticks < MAX_STEPS_PER_FRAME:
                game.update()
                accumulator -= FRAME_TIME
                ticks += 1
                fps_frame_count += 1

            game.render()

            if fps_timer >= 0.5:
                game.renderer.current_fps = fps_frame_count / fps_timer
                fps_frame_count = 0
                fps_timer = 0.0

            elapsed = time.perf_counter() - now
            sleep_time = FRAME_TIME - elapsed
            if sleep_time > 0.001:
                time.sleep(sleep_time * 0.9)

        print(term.normal, end='', flush=True)


if __name__ == '__main__':
    main()

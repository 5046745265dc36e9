"""Timer Gallery - Interactive countdown, stopwatch and delayer viewer.

Exercises tick-timer: CountdownTimer, StopwatchTimer, Delayer and TimerDriver,
driven from a pygame frame loop with a fixed-timestep accumulator.

Controls:
  Space   Start countdown / pause / resume
  F       Force-end countdown (abort, no on_stop)
  R       Reset countdown to its duration
  +/-     Adjust countdown duration
  S       Start / stop stopwatch
  L       Record lap
  D       Start delayer (cancel if active)
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_timer import CountdownTimer, Delayer, StopwatchTimer, TimerDriver
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W, TPS
from ui.panels import draw_countdown, draw_delayer, draw_status_bar, draw_stopwatch

logger = logging.getLogger("timer_gallery")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Timer Gallery - tick-timer visual demo")
    p.add_argument("--tps", type=int, default=TPS, help=f"Ticks per second (default: {TPS})")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frames per second (default: {FPS})")
    p.add_argument("--duration", type=float, default=10.0,
                   help="Countdown duration in seconds (default: 10)")
    p.add_argument("--debug", action="store_true", help="Log timer transitions")
    args = p.parse_args()
    args.duration = max(1.0, args.duration)
    return args


class GalleryState:
    """Holds the driver, the timers, and what the panels show."""

    def __init__(self, tps: int, duration: float) -> None:
        self.driver = TimerDriver(tps=tps)
        self.countdown = self.driver.add(CountdownTimer(duration))
        self.stopwatch = self.driver.add(StopwatchTimer())
        self.delayer = self.driver.add(
            Delayer(1.5, 1.0, lambda: self._say("Delayed callback fired"))
        )

        self.countdown_state = "idle"
        self.laps: list[float] = []
        self._last_lap = 0.0
        self.message = ""

        self.countdown.on_start.subscribe(lambda: self._set_countdown("running"))
        self.countdown.on_stop.subscribe(lambda: self._set_countdown("finished"))
        self.countdown.on_force_end.subscribe(lambda: self._set_countdown("aborted"))
        self.delayer.on_done.subscribe(lambda: self._say("Delayer done"))

    def _set_countdown(self, state: str) -> None:
        logger.info("Countdown %s at %.2fs", state, self.countdown.elapsed)
        self.countdown_state = state

    def _say(self, message: str) -> None:
        logger.info(message)
        self.message = message

    def toggle_countdown(self) -> None:
        if self.countdown_state in ("idle", "finished", "aborted"):
            self.countdown.start()
        elif self.countdown.is_running:
            self.countdown.pause()
            self.countdown_state = "paused"
        else:
            self.countdown.resume()
            self.countdown_state = "running"

    def reset_countdown(self, duration: float | None = None) -> None:
        self.countdown.reset(duration)
        if not self.countdown.is_running:
            self.countdown_state = "idle"

    def toggle_stopwatch(self) -> None:
        if self.stopwatch.is_running:
            self.stopwatch.stop()
        else:
            self.stopwatch.start()
            self.laps.clear()
            self._last_lap = 0.0

    def lap(self) -> None:
        if not self.stopwatch.is_running:
            return
        now = self.stopwatch.get_time()
        self.laps.append(now - self._last_lap)
        self._last_lap = now

    def toggle_delayer(self) -> None:
        if self.delayer.phase in ("delay", "continuance"):
            self.delayer.cancel()
            self._say("Delayer cancelled")
        else:
            self.message = ""
            self.delayer.start()

    @property
    def stopwatch_state(self) -> str:
        return "running" if self.stopwatch.is_running else "idle"


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)5s] %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Timer Gallery - tick-timer demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    state = GalleryState(args.tps, args.duration)

    tick_interval = 1.0 / args.tps
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(args.fps) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.toggle_countdown()
                elif event.key == pygame.K_f:
                    state.countdown.force_end()
                elif event.key == pygame.K_r:
                    state.reset_countdown()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.reset_countdown(min(state.countdown.initial_duration + 5, 120))
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.reset_countdown(max(state.countdown.initial_duration - 5, 5))
                elif event.key == pygame.K_s:
                    state.toggle_stopwatch()
                elif event.key == pygame.K_l:
                    state.lap()
                elif event.key == pygame.K_d:
                    state.toggle_delayer()

        # --- Tick ---
        while accumulator >= tick_interval:
            state.driver.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_countdown(screen, font, state.countdown, state.countdown_state)
        draw_stopwatch(screen, font, state.stopwatch, state.laps, state.stopwatch_state)
        draw_delayer(screen, font, state.delayer, state.message)
        draw_status_bar(screen, font, state.driver.clock.tick_number)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()

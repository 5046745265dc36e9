"""Timer panels and bottom status bar."""
from __future__ import annotations

import math

import pygame

from tick_timer import CountdownTimer, Delayer, StopwatchTimer, format_countdown
from ui.constants import (
    BAR_BG,
    BAR_H,
    BAR_W,
    PANEL_BG,
    PANEL_BORDER,
    PANEL_H,
    PANEL_PAD,
    PURPLE,
    SCREEN_W,
    STATE_COLORS,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def _panel(surface: pygame.Surface, font: pygame.font.Font, index: int, title: str) -> int:
    """Draw panel background and title; return the y of the panel content."""
    y = index * PANEL_H
    pygame.draw.rect(surface, PANEL_BG, (0, y, SCREEN_W, PANEL_H))
    pygame.draw.line(surface, PANEL_BORDER, (0, y + PANEL_H - 1), (SCREEN_W, y + PANEL_H - 1))
    surface.blit(font.render(title, True, TEXT_COLOR), (PANEL_PAD, y + 8))
    return y + 32


def _clock_text(seconds: float, include_hours: bool = False) -> str:
    return format_countdown(0, max(math.ceil(seconds), 0), include_hours, now=0)


def draw_countdown(
    surface: pygame.Surface,
    font: pygame.font.Font,
    timer: CountdownTimer,
    state: str,
) -> None:
    """Countdown panel: remaining-time bar filled by ``progress``."""
    y = _panel(surface, font, 0, "COUNTDOWN")
    color = STATE_COLORS[state]

    pygame.draw.rect(surface, BAR_BG, (PANEL_PAD, y, BAR_W, BAR_H))
    fill = max(0.0, min(timer.progress, 1.0)) if timer.initial_duration else 0.0
    pygame.draw.rect(surface, color, (PANEL_PAD, y, int(BAR_W * fill), BAR_H))

    text = f"{_clock_text(timer.elapsed)}  / {timer.initial_duration:.0f}s  [{state}]"
    surface.blit(font.render(text, True, TEXT_COLOR), (PANEL_PAD, y + BAR_H + 8))


def draw_stopwatch(
    surface: pygame.Surface,
    font: pygame.font.Font,
    timer: StopwatchTimer,
    laps: list[float],
    state: str,
) -> None:
    """Stopwatch panel: accumulated time and recent laps."""
    y = _panel(surface, font, 1, "STOPWATCH")
    color = STATE_COLORS[state]

    surface.blit(font.render(f"{timer.get_time():8.2f}s", True, color), (PANEL_PAD, y))
    recent = "  ".join(f"{lap:.2f}" for lap in laps[-5:])
    surface.blit(font.render(f"Laps: {recent}", True, TEXT_DIM), (PANEL_PAD, y + 24))


def draw_delayer(
    surface: pygame.Surface,
    font: pygame.font.Font,
    delayer: Delayer,
    message: str,
) -> None:
    """Delayer panel: phase, time left in the phase, and the last message."""
    y = _panel(surface, font, 2, "DELAYER")
    surface.blit(
        font.render(f"Phase: {delayer.phase}  ({delayer.remaining:.2f}s)", True, TEXT_COLOR),
        (PANEL_PAD, y),
    )
    if message:
        surface.blit(font.render(message, True, PURPLE), (PANEL_PAD, y + 24))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, tick_number: int) -> None:
    """Draw bottom key-bindings bar."""
    y = PANEL_H * 3
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, PANEL_BORDER, (0, y), (SCREEN_W, y))

    text = (
        f"t{tick_number}  [Space] Start/Pause  [F] Force  [R] Reset  "
        "[S] Watch  [L] Lap  [D] Delay  [Esc] Quit"
    )
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))

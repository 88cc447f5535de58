# render.py
from __future__ import annotations
import math
from typing import List, Sequence, Tuple

import pygame  # type: ignore

from .config import (
    BG, BOARD_PX, BORDER, CELL_SIZE, EYE, FOOD_A, FOOD_B, GRID, GRID_SIZE,
    HUD_HEIGHT, LEADERBOARD_SIZE, OVERLAY, POWER_BLINK, POWER_DOUBLE,
    POWER_SLOW, SLOW, SNAKE_ALT, SNAKE_BODY, SNAKE_HEAD, TEXT, TEXT_MUTED,
    WIDTH, DOWN, LEFT, RIGHT,
)
from .models import Mode, SessionState
from .session import Snapshot


# ---------- Timing helpers ----------
def food_pulse(age_ms: float) -> float:
    """Scale factor in [0.4, 1.0] for the breathing food pellet."""
    return 0.7 + math.sin(age_ms / 160) * 0.3


def power_up_visible(age_ms: float) -> bool:
    """Blink phase: True shows the kind color, False flashes white."""
    return math.sin(age_ms / 120) > 0


# ---------- Text ----------
def effect_label(snap: Snapshot) -> str:
    if snap.effect_kind is None:
        return "Effect: none"
    if snap.effect_kind == SLOW:
        return f"Effect: Slow ({snap.effect_remaining / 1000:.1f}s)"
    return f"Effect: Double Score ({int(snap.effect_remaining)} foods)"


def hud_lines(snap: Snapshot) -> List[str]:
    return [
        f"Score: {snap.score}   Best: {snap.best}   Level: {snap.level}",
        f"Speed: {snap.tick_rate:.1f}   Mode: {snap.mode.label}   {effect_label(snap)}",
    ]


def overlay_lines(snap: Snapshot) -> Tuple[List[str], List[str]]:
    """(title lines, sub lines) for the centered overlay; empty while running."""
    if snap.state is SessionState.MENU:
        return ["PIXEL SNAKE"], [
            "Enter = Start",
            "Arrows / WASD = Move",
            f"M = Switch mode ({snap.mode.label})",
            "P = Pause | Esc = Menu",
        ]
    if snap.state is SessionState.PAUSED:
        return ["PAUSE"], ["P = Resume", "Esc = Menu"]
    if snap.state is SessionState.GAME_OVER:
        return ["GAME OVER"], [
            f"Score: {snap.score}",
            f"Highscore: {snap.best}",
            "Enter = Restart",
            "M = Switch mode | Esc = Menu",
        ]
    return [], []


def top_five_lines(scores: Sequence[int], mode: Mode) -> List[str]:
    lines = [f"Top {LEADERBOARD_SIZE} ({mode.label}):"]
    for i in range(LEADERBOARD_SIZE):
        val = scores[i] if i < len(scores) else "-"
        lines.append(f"{i + 1}. {val}")
    return lines


# ---------- Draw ----------
def cell_rect(gx: int, gy: int, inset: int = 0) -> pygame.Rect:
    return pygame.Rect(
        gx * CELL_SIZE + inset,
        gy * CELL_SIZE + inset,
        CELL_SIZE - inset * 2,
        CELL_SIZE - inset * 2,
    )


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color) -> None:
    pygame.draw.rect(screen, color, cell_rect(gx, gy))


def draw_board(screen: pygame.Surface) -> None:
    screen.fill(BG)
    for y in range(GRID_SIZE):
        for x in range(GRID_SIZE):
            if (x + y) % 2 == 0:
                draw_cell(screen, x, y, GRID)
    for i in range(GRID_SIZE):
        draw_cell(screen, i, 0, BORDER)
        draw_cell(screen, i, GRID_SIZE - 1, BORDER)
        draw_cell(screen, 0, i, BORDER)
        draw_cell(screen, GRID_SIZE - 1, i, BORDER)


def _eye_offsets(direction) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    # fractions of a cell for the two eyes
    if direction in (LEFT, RIGHT):
        return (0.25, 0.25), (0.6, 0.62)
    if direction == DOWN:
        return (0.25, 0.6), (0.6, 0.6)
    return (0.25, 0.25), (0.6, 0.25)


def draw_snake(screen: pygame.Surface, snake: Sequence[Tuple[int, int]], direction) -> None:
    for i, (x, y) in enumerate(snake):
        if i == 0:
            color = SNAKE_HEAD
        else:
            color = SNAKE_BODY if i % 2 == 0 else SNAKE_ALT
        draw_cell(screen, x, y, color)

    if not snake:
        return
    hx, hy = snake[0]
    eye = max(2, int(CELL_SIZE * 0.18))
    for fx, fy in _eye_offsets(direction):
        rect = pygame.Rect(int(hx * CELL_SIZE + CELL_SIZE * fx), int(hy * CELL_SIZE + CELL_SIZE * fy), eye, eye)
        pygame.draw.rect(screen, EYE, rect)


def draw_food(screen: pygame.Surface, snap: Snapshot) -> None:
    if snap.food is None:
        return
    inset = int(CELL_SIZE * (1 - food_pulse(snap.food_age)) / 2)
    fx, fy = snap.food
    pygame.draw.rect(screen, FOOD_B, cell_rect(fx, fy, inset))
    inner = cell_rect(fx, fy, inset + 2)
    if inner.width > 0:
        pygame.draw.rect(screen, FOOD_A, inner)


def draw_power_up(screen: pygame.Surface, snap: Snapshot) -> None:
    if snap.power_up is None:
        return
    color = POWER_SLOW if snap.power_up_kind == SLOW else POWER_DOUBLE
    if not power_up_visible(snap.power_up_age):
        color = POWER_BLINK
    draw_cell(screen, snap.power_up[0], snap.power_up[1], color)


def draw_centered(screen: pygame.Surface, fonts, lines: List[str], sub_lines: List[str]) -> None:
    title_font, body_font, _ = fonts
    overlay = pygame.Surface((BOARD_PX, BOARD_PX), pygame.SRCALPHA)
    overlay.fill(OVERLAY)
    screen.blit(overlay, (0, 0))

    cx, cy = BOARD_PX // 2, BOARD_PX // 2
    for i, line in enumerate(lines):
        txt = title_font.render(line, True, TEXT)
        screen.blit(txt, txt.get_rect(center=(cx, cy - 80 + i * 36)))
    for i, line in enumerate(sub_lines):
        txt = body_font.render(line, True, TEXT)
        screen.blit(txt, txt.get_rect(center=(cx, cy + i * 24)))


def draw_top_five(screen: pygame.Surface, fonts, snap: Snapshot) -> None:
    small = fonts[2]
    for i, line in enumerate(top_five_lines(snap.leaderboard, snap.mode)):
        txt = small.render(line, True, TEXT_MUTED)
        screen.blit(txt, (36, BOARD_PX - 160 + i * 22))


def draw_hud(screen: pygame.Surface, fonts, snap: Snapshot) -> None:
    small = fonts[2]
    pygame.draw.rect(screen, BG, pygame.Rect(0, BOARD_PX, WIDTH, HUD_HEIGHT))
    for i, line in enumerate(hud_lines(snap)):
        txt = small.render(line, True, TEXT)
        screen.blit(txt, (12, BOARD_PX + 10 + i * 24))


def draw_frame(screen: pygame.Surface, fonts, snap: Snapshot) -> None:
    """Paint one whole frame from a snapshot; never touches the session."""
    draw_board(screen)
    if snap.state is not SessionState.MENU:
        draw_food(screen, snap)
        draw_power_up(screen, snap)
        draw_snake(screen, snap.snake, snap.direction)

    lines, sub_lines = overlay_lines(snap)
    if lines:
        draw_centered(screen, fonts, lines, sub_lines)
    if snap.state in (SessionState.MENU, SessionState.GAME_OVER):
        draw_top_five(screen, fonts, snap)
    draw_hud(screen, fonts, snap)


def load_fonts() -> Tuple[pygame.font.Font, pygame.font.Font, pygame.font.Font]:
    """(title, body, small); needs pygame.font initialised."""
    return (
        pygame.font.SysFont("monospace", 28, bold=True),
        pygame.font.SysFont("monospace", 16),
        pygame.font.SysFont("monospace", 14),
    )

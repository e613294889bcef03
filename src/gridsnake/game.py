# game.py
from typing import Tuple
import pygame # type: ignore

from .config import (
    CELL_SIZE, HUD_H,
    BG, GRID, GREEN, HEAD, RED, TEXT, GOLD,
)
from .grid import Direction
from .session import GameSession
from .simulation import GameView, SessionPhase

# ----- Commands produced by the keyboard adapter -----
QUIT, START, PAUSE, RESTART, MUTE = "quit", "start", "pause", "restart", "mute"

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,       pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,   pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,   pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT, pygame.K_d: Direction.RIGHT,
}

KEY_COMMANDS = {
    pygame.K_SPACE: PAUSE,
    pygame.K_RETURN: START,
    pygame.K_r: RESTART,
    pygame.K_f: MUTE,
    pygame.K_ESCAPE: QUIT,
}

# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int],
              cell: int = CELL_SIZE, inset: int = 1) -> None:
    rect = pygame.Rect(gx * cell + inset, HUD_H + gy * cell + inset,
                       cell - 2 * inset, cell - 2 * inset)
    pygame.draw.rect(screen, color, rect)

def blit_centered(screen: pygame.Surface, font: pygame.font.Font, text: str,
                  dy: int = 0, color: Tuple[int, int, int] = TEXT) -> None:
    surf = font.render(text, True, color)
    w, h = screen.get_size()
    screen.blit(surf, surf.get_rect(center=(w // 2, (h + HUD_H) // 2 + dy)))

def dim(screen: pygame.Surface, alpha: int = 140) -> None:
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))  # RGBA
    screen.blit(overlay, (0, 0))

# ---------- Input ----------
def key_command(key: int):
    """Map a pygame key to a Direction, a command string, or None."""
    if key in KEY_DIRECTIONS:
        return KEY_DIRECTIONS[key]
    return KEY_COMMANDS.get(key)

def handle_input(session: GameSession, now_ms: int, audio=None) -> bool:
    """Route pygame events to the session. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type != pygame.KEYDOWN:
            continue

        cmd = key_command(event.key)
        if cmd is None:
            continue
        if cmd == QUIT:
            return False
        if cmd == MUTE:
            if audio is not None:
                audio.toggle_mute()
        elif isinstance(cmd, Direction):
            session.steer(cmd)
        elif session.phase is SessionPhase.MENU and cmd in (START, PAUSE):
            session.start(now_ms)
        elif cmd == PAUSE:
            session.toggle_pause()
        elif cmd == RESTART:
            session.restart(now_ms)
    return True

# ---------- Draw ----------
def draw_game(screen: pygame.Surface, font: pygame.font.Font, view: GameView,
              cell: int = CELL_SIZE) -> None:
    screen.fill(BG)
    for x, y in view.board.cells():
        draw_cell(screen, x, y, GRID, cell, inset=0)
        draw_cell(screen, x, y, BG, cell)

    if view.phase is not SessionPhase.MENU and view.food is not None:
        draw_cell(screen, view.food[0], view.food[1], RED, cell, inset=4)

    # stacked duplicates at the tail are drawn once
    seen = set()
    for i, (x, y) in enumerate(view.body):
        if (x, y) in seen:
            continue
        seen.add((x, y))
        color = GREEN if view.alive else (120, 120, 120)
        if i == 0 and view.alive:
            color = HEAD
        draw_cell(screen, x, y, color, cell)

    won_colour = GOLD if view.length >= view.win_length else TEXT
    txt = font.render(f"Length: {view.target_score}", True, won_colour)
    best = font.render(f"Best: {view.high_score}", True, TEXT)
    screen.blit(txt, (8, 6))
    screen.blit(best, (screen.get_width() - best.get_width() - 8, 6))

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, session: GameSession,
                 muted: bool = False) -> None:
    """Menu, countdown, pause banner and game-over screen on top of the board."""
    phase = session.phase
    if phase is SessionPhase.MENU:
        dim(screen)
        blit_centered(screen, font, "SNAKE", -24)
        blit_centered(screen, font, "Press Enter to start", 8)
    elif phase is SessionPhase.COUNTDOWN and session.countdown:
        blit_centered(screen, font, str(session.countdown), 0, GOLD)
    elif phase is SessionPhase.PAUSED:
        dim(screen, 100)
        blit_centered(screen, font, "PAUSED", -8)
        blit_centered(screen, font, "Space to resume", 20)
    elif phase is SessionPhase.GAME_OVER:
        draw_game_over(screen, font, session.view().target_score, session.won)

    if muted:
        tag = font.render("muted", True, TEXT)
        screen.blit(tag, ((screen.get_width() - tag.get_width()) // 2, 6))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int, won: bool) -> None:
    dim(screen)
    blit_centered(screen, font, "YOU WIN" if won else "GAME OVER", -16, (240, 240, 250))
    blit_centered(screen, font, "Press R to restart", 16)
    blit_centered(screen, font, f"Length: {score}", 44)

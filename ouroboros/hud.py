"""
HUD and Screens
================
Everything drawn on top of the world: the bottom status rows, the
title screen, the level-up overlay and the game over screen.

These read an engine snapshot only; nothing here touches simulation state.
"""

import random

from .components import GameSnapshot
from .render import (
    GameRenderer, NEON_CYAN, NEON_MAGENTA, NEON_YELLOW, NEON_GREEN, NEON_RED,
    SKY, WHITE, GRAY_DARK, GRAY_MED, GRAY_DARKER
)
from .upgrades import KIND_UPGRADE, KIND_NEW


TITLE_ART = [
    r"  ___  _   _ ___  ___  ___  ___  ___  ___  ___ ",
    r" / _ \| | | | _ \/ _ \| _ )/ _ \| _ \/ _ \/ __|",
    r"| (_) | |_| |   / (_) | _ \ (_) |   / (_) \__ \ ",
    r" \___/ \___/|_|_\\___/|___/\___/|_|_\\___/|___/",
]

KIND_COLORS = {
    KIND_UPGRADE: NEON_CYAN,
    KIND_NEW: NEON_GREEN,
}


def _bar(value: float, maximum: float, width: int) -> str:
    filled = 0 if maximum <= 0 else max(0, min(width, int(value / maximum * width)))
    return '|' * filled + '.' * (width - filled)


def _format_time(seconds: float) -> str:
    minutes, secs = divmod(int(seconds), 60)
    return f'{minutes:02d}:{secs:02d}'


# =============================================================================
# HUD
# =============================================================================

def render_ui(renderer: GameRenderer, snap: GameSnapshot):
    """Render the HUD in the bottom 3 rows."""
    ui_y = renderer.game_height
    width = renderer.width

    renderer.buffer.put_string(0, ui_y, '=' * width, GRAY_DARK)
    renderer.buffer.put_string(2, ui_y, ' OUROBOROS ', NEON_MAGENTA)

    status = (f' TIME:{_format_time(snap.game_time)}  '
              f'SNAKES:{snap.enemy_count}  BOSSES:{snap.boss_count} ')
    renderer.buffer.put_string(width - len(status) - 1, ui_y, status, NEON_YELLOW)

    # Row 1: vitals
    row1_y = ui_y + 1
    hp_color = NEON_CYAN if snap.hp > snap.max_hp * 0.3 else NEON_RED
    renderer.buffer.put_string(2, row1_y, 'HP:', GRAY_MED)
    renderer.buffer.put_string(6, row1_y, f'[{_bar(snap.hp, snap.max_hp, 20)}]', hp_color)
    renderer.buffer.put_string(29, row1_y, f'{int(snap.hp)}/{int(snap.max_hp)}', hp_color)

    exp_text = f'LV {snap.level}  EXP [{_bar(snap.exp, snap.exp_to_next_level, 15)}]'
    renderer.buffer.put_string(40, row1_y, exp_text, NEON_GREEN)

    atk = f'ATK x{1 / snap.attack_penalty:.2f}'
    if snap.time_dilated:
        atk += '  SLOW-TIME'
    renderer.buffer.put_string(width - len(atk) - 2, row1_y, atk,
                               SKY if snap.time_dilated else GRAY_MED)

    # Row 2: roster
    wx = 2
    for info in snap.weapons:
        text = f'{info.name} {info.level}'
        if wx + len(text) >= width - 12:
            renderer.buffer.put_string(wx, ui_y + 2, '...', GRAY_DARK)
            break
        color = NEON_YELLOW if info.level >= info.max_level else WHITE
        renderer.buffer.put_string(wx, ui_y + 2, text, color)
        wx += len(text) + 2
    renderer.buffer.put_string(width - 10, ui_y + 2, 'Q:Quit', GRAY_DARKER)

    if renderer.show_fps:
        fps_text = f'FPS:{renderer.current_fps:.0f}'
        renderer.buffer.put_string(width - len(fps_text) - 2, 0, fps_text, GRAY_MED)


# =============================================================================
# SCREENS
# =============================================================================

def render_title_screen(renderer: GameRenderer, frame: int):
    width = renderer.width
    height = renderer.game_height

    art_y = height // 2 - 5
    for i, line in enumerate(TITLE_ART):
        x = width // 2 - len(line) // 2
        color = NEON_GREEN if i % 2 == 0 else NEON_CYAN
        renderer.buffer.put_string(max(0, x), art_y + i, line, color)

    sub = 'SURVIVE THE SERPENTS'
    renderer.buffer.put_string(width // 2 - len(sub) // 2, art_y + len(TITLE_ART) + 1,
                               sub, GRAY_MED)

    if (frame // 30) % 2 == 0:
        prompt = '[ PRESS ANY KEY TO START ]'
        renderer.buffer.put_string(width // 2 - len(prompt) // 2,
                                   art_y + len(TITLE_ART) + 4, prompt, NEON_GREEN)

    controls = [
        'WASD / ARROWS - Move',
        '1-3 - Pick upgrade    F - Toggle FPS',
        'Q/ESC - Quit',
    ]
    cy = art_y + len(TITLE_ART) + 6
    for i, line in enumerate(controls):
        renderer.buffer.put_string(width // 2 - len(line) // 2, cy + i, line, GRAY_DARK)

    renderer.draw_box(0, 0, width, height, GRAY_DARKER, '.')


def render_level_up(renderer: GameRenderer, choices: list, frame: int):
    """Upgrade selection overlay drawn over the frozen world."""
    width = renderer.width
    height = renderer.game_height

    box_w = min(width - 4, 64)
    box_h = 4 + len(choices) * 3 + 1
    box_x = width // 2 - box_w // 2
    box_y = max(0, height // 2 - box_h // 2)

    for row in range(box_h):
        renderer.buffer.put_string(box_x, box_y + row, ' ' * box_w, GRAY_DARK)

    top = '┌─── LEVEL UP ' + '─' * (box_w - 15) + '┐'
    bot = '└' + '─' * (box_w - 2) + '┘'
    renderer.buffer.put_string(box_x, box_y, top, NEON_MAGENTA)
    renderer.buffer.put_string(box_x, box_y + box_h - 1, bot, NEON_MAGENTA)
    for row in range(1, box_h - 1):
        renderer.buffer.put_string(box_x, box_y + row, '│', NEON_MAGENTA)
        renderer.buffer.put_string(box_x + box_w - 1, box_y + row, '│', NEON_MAGENTA)

    for i, choice in enumerate(choices):
        row_y = box_y + 2 + i * 3
        renderer.buffer.put_string(box_x + 2, row_y, f'[{i + 1}]', WHITE)
        renderer.buffer.put_string(box_x + 6, row_y, choice.title[:box_w - 8],
                                   KIND_COLORS.get(choice.kind, NEON_YELLOW))
        renderer.buffer.put_string(box_x + 6, row_y + 1, choice.description[:box_w - 8],
                                   GRAY_MED)

    if (frame // 20) % 2 == 0:
        prompt = f'PRESS 1-{len(choices)}'
        renderer.buffer.put_string(box_x + box_w // 2 - len(prompt) // 2,
                                   box_y + box_h - 2, prompt, NEON_YELLOW)


def render_game_over_screen(renderer: GameRenderer, snap: GameSnapshot, frame: int):
    width = renderer.width
    height = renderer.game_height

    # Static noise background
    for _ in range(int(width * height * 0.02)):
        nx = random.randint(0, width - 1)
        ny = random.randint(0, height - 1)
        renderer.buffer.put(nx, ny, random.choice(['.', '*', '~']),
                            random.choice([GRAY_DARKER, GRAY_DARK, 236]))

    title = 'G A M E   O V E R'
    art_y = height // 2 - 4
    renderer.buffer.put_string(width // 2 - len(title) // 2, art_y, title, NEON_RED)

    stat_lines = [
        f'SURVIVED: {_format_time(snap.game_time)}',
        f'LEVEL REACHED: {snap.level}',
        f'WEAPONS: {len(snap.weapons)}',
    ]
    for i, line in enumerate(stat_lines):
        renderer.buffer.put_string(width // 2 - len(line) // 2, art_y + 2 + i,
                                   line, NEON_YELLOW)

    if (frame // 30) % 2 == 0:
        restart = '[ R - RESTART ]    [ Q - QUIT ]'
        renderer.buffer.put_string(width // 2 - len(restart) // 2,
                                   art_y + 3 + len(stat_lines) + 1, restart, NEON_CYAN)

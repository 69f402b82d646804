"""
Screens
=======

Instructions before the game and the game-over banner after it. Both draw a
static page and block until a key is pressed.
"""

from __future__ import annotations

import curses
from typing import List, Optional

from dog_pacman.pacman_core.object_catalog import ObjectCatalog
from dog_pacman.pacman_core.render_terminal import ColorTable, safe_addstr

TITLE = "DOG PACMAN - INSTRUCTIONS"

GAME_OVER_ART = [
    r"  ____    _    __  __ _____    _____     _______ ____  ",
    r" / ___|  / \  |  \/  | ____|  / _ \ \   / / ____|  _ \ ",
    r"| |  _  / _ \ | |\/| |  _|   | | | \ \ / /|  _| | |_) |",
    r"| |_| |/ ___ \| |  | | |___  | |_| |\ V / | |___|  _ < ",
    r" \____/_/   \_\_|  |_|_____|  \___/  \_/  |_____|_| \_\ ",
]


def instruction_lines(catalog: ObjectCatalog) -> List[str]:
    """Instruction text, one entry per line."""
    lines = [
        "Time the dog's mouth so it eats only the right things.",
        "",
        "OBJECTS:",
    ]
    for kind in catalog:
        if kind.is_edible:
            lines.append(f"  * {kind.name.upper()} ({kind.color}) - EAT! Open the mouth to eat it.")
        else:
            lines.append(f"  * {kind.name.upper()} ({kind.color}) - DON'T EAT! Keep the mouth shut.")
    edible = " / ".join(k.name for k in catalog.edible_kinds)
    lines += [
        "",
        "CONTROLS:",
        "  * SPACE - open mouth",
        "  * ESC/Q - quit",
        "",
        "RULES:",
        f"  * +1 point for each {edible} eaten",
        "  * -1 life for biting anything else",
        f"  * -1 life for letting a {edible} pass with the mouth shut",
        "",
        "Press any key to start...",
    ]
    return lines


def _centered(window, y: int, text: str, attr: int) -> None:
    _, width = window.getmaxyx()
    safe_addstr(window, y, width // 2 - len(text) // 2, text, attr)


def _wait_for_key(window) -> int:
    window.nodelay(False)
    window.timeout(-1)
    return window.getch()


def show_instructions(window, catalog: ObjectCatalog, colors: Optional[ColorTable] = None) -> None:
    """Draw the instructions page and wait for any key."""
    colors = colors or ColorTable()
    height, _ = window.getmaxyx()

    window.erase()
    _centered(window, 3, TITLE, colors.attr("yellow"))

    lines = instruction_lines(catalog)
    start_y = height // 2 - len(lines) // 2
    for i, line in enumerate(lines):
        _centered(window, start_y + i, line, colors.attr("white"))

    window.refresh()
    _wait_for_key(window)


def draw_game_over(window, score: int, colors: Optional[ColorTable] = None) -> None:
    """Draw the game-over banner with the final score and wait for any key."""
    colors = colors or ColorTable()
    height, _ = window.getmaxyx()

    window.erase()
    art_y = height // 2 - len(GAME_OVER_ART) - 2
    for i, line in enumerate(GAME_OVER_ART):
        _centered(window, art_y + i, line, colors.attr("red"))

    _centered(window, height // 2 + 3, f"Final Score: {score}", colors.attr("yellow"))
    _centered(window, height // 2 + 5, "Press any key to exit", colors.attr("white"))
    window.refresh()

    # Keys pressed during play must not dismiss the banner
    curses.flushinp()
    _wait_for_key(window)

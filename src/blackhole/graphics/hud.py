"""HUD text layout. The window turns these into font surfaces."""

from dataclasses import dataclass
from typing import List, Tuple

from blackhole.core.state import State
from blackhole.game.session import GameSession
from blackhole.storage.highscore import format_time

START_PROMPT = "Press ← or → to Start"
LOADING_PROMPT = "...Loading..."


@dataclass(frozen=True)
class HudText:
    """One line of text anchored at (x, y), y being the text baseline."""
    text: str
    x: float
    y: float
    color: Tuple[int, int, int]
    size: int = 18
    align: str = "left"  # left, right, center
    bold: bool = False
    outline: bool = False


def hud_lines(session: GameSession) -> List[HudText]:
    palette = session.config.palette
    width = session.canvas.width
    height = session.canvas.height
    text_color = palette.rgb("text")

    lines = [
        HudText(f"Time: {format_time(session.elapsed)}s", 10, 26, text_color),
        HudText(f"Best: {format_time(session.best)}s", width - 10, 26,
                palette.rgb("best_text"), align="right"),
    ]

    shield = session.world.shield
    if shield is not None:
        cx, cy = shield.center
        lines.append(HudText("S", cx, cy + 7, text_color, size=18, align="center", bold=True))

    if session.state in (State.LOADING, State.READY):
        ready = session.state == State.READY and session.world.player.can_jump
        lines.append(HudText(
            START_PROMPT if ready else LOADING_PROMPT,
            width / 2, height / 2, text_color,
            size=24, align="center", bold=True, outline=True,
        ))

    return lines

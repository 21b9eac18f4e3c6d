from __future__ import annotations

# Box layout, in fixed creation order (kind, initial weight)
BOX_LAYOUT = (
    ("green", 0.0),
    ("green", 0.1),
    ("blue", 0.2),
    ("blue", 0.3),
)
N_BOXES = len(BOX_LAYOUT)

# Green boxes score over the most recent absorptions only
GREEN_WINDOW = 3

# Players, in turn order (A starts)
PLAYERS = ("A", "B")

TRANSCRIPT_COLUMNS = (
    "turn", "player", "token", "box_index", "box_kind",
    "box_weight", "result", "player_score",
)

"""The bundled 10x10 board.

E = empty ice, W = wall, T = target, H = hole, O1 = the two ends of the
portal pair, P1 / P2 = player spawns.
"""

from typing import List

DEFAULT_LAYOUT: List[List[str]] = [
    ["P1", "E", "E", "E", "W", "E", "E", "E", "E", "P2"],
    ["E", "W", "E", "O1", "E", "E", "E", "W", "E", "E"],
    ["E", "E", "E", "W", "E", "W", "E", "E", "W", "E"],
    ["E", "E", "W", "E", "E", "E", "W", "E", "H", "E"],
    ["W", "E", "E", "E", "T", "E", "E", "E", "E", "W"],
    ["W", "E", "E", "H", "E", "E", "E", "E", "E", "W"],
    ["E", "E", "E", "W", "E", "E", "W", "E", "E", "E"],
    ["E", "E", "W", "E", "E", "W", "E", "W", "E", "E"],
    ["E", "W", "E", "O1", "E", "E", "E", "E", "W", "E"],
    ["E", "E", "E", "E", "W", "E", "E", "E", "E", "E"],
]

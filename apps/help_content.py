"""Help lines for the maze editor overlay."""
from __future__ import annotations

from typing import Dict, List

# Topics stay short and linear so the overlay can render them without scrolling.
HELP_TOPICS: List[Dict[str, object]] = [
    {
        "id": "editing",
        "title": "Editing walls",
        "lines": [
            "E or Edit button: toggle wall editing (robot is hidden while editing).",
            "Click a wall strip: flip it on/off.",
            "Drag with left button: paint walls on; right button: erase.",
            "Boundary walls are fixed and cannot be removed.",
        ],
    },
    {
        "id": "files",
        "title": "Files",
        "lines": [
            "S or Save button: write the maze JSON (--maze path or mazes/maze.json).",
            "C: clear every interior wall.",
        ],
    },
    {
        "id": "robot",
        "title": "Robot overlay",
        "lines": [
            "P: pause/resume the demo robot tour around the outer ring of cells.",
            "R: restart the tour from the top-left cell.",
            "H: show/hide this help.   ESC: quit.",
        ],
    },
]


def help_lines() -> List[str]:
    lines: List[str] = []
    for topic in HELP_TOPICS:
        lines.append(str(topic["title"]))
        lines.extend(f"  {line}" for line in topic["lines"])  # type: ignore[union-attr]
    return lines

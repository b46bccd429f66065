from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class NavigationState:
    current_dir: Path = field(default_factory=lambda: Path("."))
    left_selected: int | None = 0
    # No key moves a right-pane selection yet; it stays None.
    right_selected: int | None = None
    selected_path: Path | None = None
    status_message: str = ""

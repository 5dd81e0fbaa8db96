"""
Tree settings - tuning parameters of the bounding-volume tree.

Settings can be kept next to a project as a JSON file and loaded with
TreeSettings.load().
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from pathlib import Path

from boxtree import log


@dataclass
class TreeSettings:
    """
    Tree tuning parameters.

    - split_threshold: a leaf is split only when it already holds more items
    - partition_epsilon: boxes with a smaller diagonal are never split
    - growth_ceiling: a root with a larger diagonal is never grown
    """

    split_threshold: int = 3
    partition_epsilon: float = 1e-8
    growth_ceiling: float = 1e8

    def __post_init__(self):
        self.validate()

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return asdict(self)

    @staticmethod
    def from_dict(data: dict) -> "TreeSettings":
        """Deserialize from dictionary."""
        return TreeSettings(
            split_threshold=int(data.get("split_threshold", 3)),
            partition_epsilon=float(data.get("partition_epsilon", 1e-8)),
            growth_ceiling=float(data.get("growth_ceiling", 1e8)),
        )

    def validate(self) -> None:
        if self.split_threshold < 0:
            raise ValueError(f"split_threshold must be non-negative, got {self.split_threshold}")
        if self.partition_epsilon <= 0.0:
            raise ValueError(f"partition_epsilon must be positive, got {self.partition_epsilon}")
        if self.growth_ceiling <= 0.0:
            raise ValueError(f"growth_ceiling must be positive, got {self.growth_ceiling}")

    @staticmethod
    def load(path: Path) -> "TreeSettings":
        """Load settings from JSON file. Missing file gives defaults."""
        path = Path(path)
        if not path.exists():
            return TreeSettings()

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        settings = TreeSettings.from_dict(data)
        log.info(f"[TreeSettings] Loaded from {path}")
        return settings

    def save(self, path: Path) -> None:
        """Save settings to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        log.info(f"[TreeSettings] Saved to {path}")

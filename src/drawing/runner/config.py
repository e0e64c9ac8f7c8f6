"""
config.py - Configuration dataclass for the shape gallery runner.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class GalleryConfig:
    """Immutable configuration of one gallery run."""
    logger_level: int = logging.INFO
    canvas_size: Tuple[float, float] = (300.0, 300.0)
    trapezoid_size: Tuple[float, float] = (200.0, 100.0)
    ring_steps: int = 100
    seed: Optional[int] = None
    output_dir: Path = Path("./out")
    log_dir: Path = Path("./logs")

    def __post_init__(self):
        # gallery files land here
        self.output_dir.mkdir(parents=True, exist_ok=True)

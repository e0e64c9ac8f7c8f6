"""
main.py - Entry point dumping a gallery of sample shape paths to JSON.

The gallery mirrors the tutorial scenes: a 4x4 checkerboard, a triangle, two
arcs, the default flower, a trapezoid (fixed and randomly inset) and the
colour-cycling rings. Each entry records the shape parameters, the rect it
was built in and the resulting command list.
"""

import json
import time
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..arc import Arc
from ..base import Shape
from ..checkerboard import Checkerboard
from ..color_cycling import color_cycling_rings
from ..flower import Flower
from ..geometry import Rect
from ..trapezoid import Trapezoid, random_trapezoid
from ..triangle import Triangle
from ..utils.logging_utils import configure_logging
from ..utils.rng import RNG
from .config import GalleryConfig

logger = logging.getLogger(__name__)

# strokeBorder(lineWidth: 40) on the half arc keeps the stroke inside the frame
HALF_ARC_STROKE_WIDTH = 40.0


def build_gallery(config: GalleryConfig, rng: RNG) -> List[Dict[str, Any]]:
    """Build every sample shape and describe it as a JSON-friendly dict."""
    canvas = Rect.from_size(*config.canvas_size)
    trapezoid_rect = Rect.from_size(*config.trapezoid_size)

    samples: List[tuple[str, Shape, Rect]] = [
        ("checkerboard",     Checkerboard(rows=4, columns=4),                     canvas),
        ("triangle",         Triangle(),                                          canvas),
        ("arc",              Arc(0.0, 110.0, clockwise=True),                     canvas),
        ("half_arc",         Arc(-90.0, 90.0, clockwise=True).inset(HALF_ARC_STROKE_WIDTH / 2), canvas),
        ("flower",           Flower(petal_offset=-20.0, petal_width=100.0),       canvas),
        ("trapezoid",        Trapezoid(inset_amount=50.0),                        trapezoid_rect),
        ("trapezoid_random", random_trapezoid(rng=rng),                           trapezoid_rect),
    ]

    entries = []
    for name, shape, rect in samples:
        path = shape.path(rect)
        logger.debug(f"{name}: {shape!r} -> {path!r}")
        entries.append({
            "name"   : name,
            "params" : shape.to_dict(),
            "rect"   : asdict(rect),
            "path"   : path.to_dict(),
        })

    rings = color_cycling_rings(canvas, amount=0.0, steps=config.ring_steps)
    entries.append({
        "name"  : "color_cycling_circle",
        "rect"  : asdict(canvas),
        "rings" : [{**ring.stop._asdict(), "path": ring.path.to_dict()} for ring in rings],
    })
    logger.info(f"Built {len(entries)} gallery entries ({len(rings)} colour rings)")
    return entries


def write_gallery(config: GalleryConfig) -> Path:
    """Build the gallery and write it to ``<output_dir>/gallery_<timestamp>.json``."""
    rng = RNG(seed=config.seed)
    entries = build_gallery(config, rng)

    ts = time.strftime("%Y%m%d_%H%M%S")
    gallery_file = Path(config.output_dir) / f"gallery_{ts}.json"
    payload = {
        "created" : time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime()),
        "config"  : asdict(config),
        "shapes"  : entries,
    }
    with open(gallery_file, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False, default=str)

    logger.info(f"Gallery written: {gallery_file}")
    return gallery_file


# ---------------------------------------------------------------------------
# Main driver
# ---------------------------------------------------------------------------
def main(output_dir: Union[Path, str] = "./out",
         seed: Optional[int] = None,
         log_dir: Union[Path, str] = "./logs",
         level: int = logging.INFO) -> None:
    """Run one gallery dump with logging configured.

    Any failure after logging is configured, creating the output directory
    included, is logged at CRITICAL and exits with status 1.
    """
    log_path = configure_logging(
        level=level,
        log_dir=log_dir,
        name="drawing",
        run_prefix="gallery",
    )
    logger.info(f"Logs written to: {log_path}")

    try:
        config = GalleryConfig(output_dir=Path(output_dir), seed=seed,
                               log_dir=Path(log_dir), logger_level=level)
        logger.info(f"GalleryConfig: {asdict(config)}")
        write_gallery(config)
    except Exception as e:
        logger.critical(f"Run aborted due to fatal error: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()

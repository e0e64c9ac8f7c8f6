from .rng import RNG, get_rng
from .logging_utils import configure_logging, ColorFormatter


__all__ = [
    "RNG", "get_rng",
    "configure_logging", "ColorFormatter",
]

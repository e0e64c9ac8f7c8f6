"""
base.py
-------

Defines the abstract interfaces shared by all parametric shapes.

Each concrete shape is a frozen dataclass holding its parameters and
implementing :meth:`Shape.path`, a pure mapping from a bounding rect to a fresh
:class:`~drawing.path.ShapePath`. Shapes keep no state between calls, so the
same parameters and rect always produce an identical path.
"""

from __future__ import annotations

__all__ = ["Shape", "InsettableShape", "finite_or_none", "non_negative_count"]

import json
import math
import logging
from abc import ABC, abstractmethod
from dataclasses import asdict, replace
from numbers import Real
from typing import Any, Dict, Optional

from .geometry import Rect, numeric
from .path import ShapePath

logger = logging.getLogger(__name__)


def finite_or_none(name: str, value: Any) -> Optional[float]:
    """Validate a numeric shape parameter.

    Returns:
        float | None: The value as float, or None when it is NaN/inf.

    Raises:
        TypeError: For non-numeric values (bool included).
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"Unsupported {name} type: {type(value).__name__}")
    value = float(value)
    return value if math.isfinite(value) else None


def non_negative_count(name: str, value: Any) -> int:
    """Grid or step count as a non-negative int; NaN/inf and negatives become 0."""
    value = finite_or_none(name, value)
    if value is None:
        return 0
    return max(0, int(value))


class Shape(ABC):
    """
    Abstract base class for parametric shapes (checkerboard, arc, flower, etc.).

    Provides:
      - A single path-producing interface (`path(rect)`)
      - Rect validation shared by all generators (`_usable_rect`)
      - Dict/JSON views of the parameter set (`to_dict()`, `json`)

    Example:
        >>> Triangle().path(Rect.from_size(300, 300))
    """

    __slots__ = ()

    # -------------------------------------------------------------------------
    # Abstract interface
    # -------------------------------------------------------------------------
    @abstractmethod
    def path(self, rect: Rect) -> ShapePath:
        """Build the shape's path inside ``rect``. Subclasses must override this method."""
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Helper methods
    # -------------------------------------------------------------------------
    def _usable_rect(self, rect: Rect) -> Optional[Rect]:
        """Return the standardized rect, or None for a degenerate one."""
        if not isinstance(rect, Rect):
            raise TypeError(f"Unsupported rect type: {type(rect).__name__}")
        if rect.is_empty:
            logger.debug(f"{self!r}: empty rect {rect}, returning empty path")
            return None
        return rect.standardized()

    def to_dict(self) -> Dict[str, Any]:
        return {"shape": self.__class__.__name__, **asdict(self)}

    @property
    def json(self) -> str:
        """JSON-encoded parameters (sorted, compact)."""
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))


class InsettableShape(Shape):
    """Shape that can be shrunk uniformly to draw concentric copies.

    Subclasses must be dataclasses with an ``inset_amount`` field.
    """

    __slots__ = ()

    inset_amount: float

    def inset(self, amount: numeric) -> InsettableShape:
        """Return a copy with ``inset_amount`` increased by ``amount``.

        This instance is left untouched, and successive insets add up:
        ``s.inset(a).inset(b) == s.inset(a + b)``.
        """
        if isinstance(amount, bool) or not isinstance(amount, Real):
            raise TypeError(f"Unsupported inset amount type: {type(amount).__name__}")
        return replace(self, inset_amount=self.inset_amount + float(amount))

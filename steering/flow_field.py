"""Two-dimensional flow field.

A dense row-major grid of vectors covering a rectangle of the world. The
rectangle is centred on the field's position and is ``columns * scale.x``
wide by ``rows * scale.y`` tall, so each cell spans one scaled unit.

Access comes in two flavours with deliberately different failure modes:

- indexed (``get_value``/``set_value``/``field[row, column]``) raises
  InvalidCellError for a cell outside the grid
- positional (``get_value_at_position``/``set_value_at_position``) returns
  a zero vector / does nothing for a point outside the bounds
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from steering.config.behaviours import (
    FLOW_ARROW_DIVISOR,
    MIN_FLOW_FIELD_CELLS,
    RANDOM_VECTOR_HIGH,
    RANDOM_VECTOR_LOW,
)
from steering.config.display import FLOW_FIELD_COLOR
from steering.debug_draw import DebugArrow, DebugRect, DebugShape
from steering.exceptions import InvalidCellError
from steering.math_utils import Vector2, random_vector, rotate
from steering.noise import perlin

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
OUTSIDE = (-1, -1)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; ``contains`` is min-inclusive, max-exclusive."""

    x: float
    y: float
    width: float
    height: float

    @property
    def x_min(self) -> float:
        return self.x

    @property
    def y_min(self) -> float:
        return self.y

    @property
    def x_max(self) -> float:
        return self.x + self.width

    @property
    def y_max(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Vector2:
        return Vector2(self.x + self.width / 2.0, self.y + self.height / 2.0)

    def contains(self, point: Vector2) -> bool:
        return self.x_min <= point.x < self.x_max and self.y_min <= point.y < self.y_max


class FlowField:
    """Grid of direction vectors sampled by row/column or world position.

    Args:
        rows: Number of rows (>= 1)
        columns: Number of columns (>= 1)
        position: World position of the field's centre
        scale: Size of one cell along x and y
        rng: Random source for ``fill_with_random_values``
        noise: Perlin source for ``fill_with_perlin_noise``, e.g. a seeded
            PerlinNoise (defaults to the shared generator)
    """

    def __init__(
        self,
        rows: int = 1,
        columns: int = 1,
        position: Optional[Vector2] = None,
        scale: Optional[Vector2] = None,
        rng: Optional[random.Random] = None,
        noise: Optional[Callable[[float, float], float]] = None,
    ) -> None:
        self._rows = max(MIN_FLOW_FIELD_CELLS, int(rows))
        self._columns = max(MIN_FLOW_FIELD_CELLS, int(columns))
        self.position = position.copy() if position is not None else Vector2(0.0, 0.0)
        self.scale = scale.copy() if scale is not None else Vector2(1.0, 1.0)
        self.rng = rng if rng is not None else random.Random()
        self.noise = noise if noise is not None else perlin
        self._field: List[Vector2] = [Vector2(0.0, 0.0) for _ in range(self._rows * self._columns)]

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @rows.setter
    def rows(self, value: int) -> None:
        value = max(MIN_FLOW_FIELD_CELLS, int(value))
        if value != self._rows:
            self._rows = value
            self._update_internal_data()

    @property
    def columns(self) -> int:
        return self._columns

    @columns.setter
    def columns(self, value: int) -> None:
        value = max(MIN_FLOW_FIELD_CELLS, int(value))
        if value != self._columns:
            self._columns = value
            self._update_internal_data()

    def __len__(self) -> int:
        return len(self._field)

    def _update_internal_data(self) -> None:
        """Reallocate the backing list when the cell count changed.

        Values are kept by linear index, not by geometric position; new
        cells start at zero.
        """
        length = self._rows * self._columns
        if len(self._field) == length:
            return
        saved = self._field
        self._field = [
            saved[i] if i < len(saved) else Vector2(0.0, 0.0) for i in range(length)
        ]
        logger.debug(
            "Flow field resized to %dx%d (%d -> %d cells)",
            self._rows,
            self._columns,
            len(saved),
            length,
        )

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------

    @property
    def bounds(self) -> Rect:
        extent_x = self._columns * self.scale.x
        extent_y = self._rows * self.scale.y
        return Rect(
            self.position.x - extent_x / 2.0,
            self.position.y - extent_y / 2.0,
            extent_x,
            extent_y,
        )

    def world_to_cell(self, position: Vector2) -> Cell:
        """(row, column) of the cell under ``position``; (-1, -1) outside."""
        bounds = self.bounds
        if not bounds.contains(position):
            return OUTSIDE
        cell_width = bounds.width / self._columns
        cell_height = bounds.height / self._rows
        # Division can round a point just inside the max edge up to rows/columns
        row = min(math.floor((position.y - bounds.y_min) / cell_height), self._rows - 1)
        column = min(math.floor((position.x - bounds.x_min) / cell_width), self._columns - 1)
        return row, column

    def cell_rect(self, row: int, column: int) -> Rect:
        """World rectangle covered by a cell (no range check)."""
        bounds = self.bounds
        width = bounds.width / self._columns
        height = bounds.height / self._rows
        return Rect(bounds.x_min + column * width, bounds.y_min + row * height, width, height)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def _index(self, row: int, column: int) -> int:
        index = row * self._columns + column
        if index < 0 or index >= self._rows * self._columns:
            raise InvalidCellError(row, column)
        return index

    def get_value(self, row: int, column: int) -> Vector2:
        """Vector stored in a cell. Raises InvalidCellError if out of range."""
        return self._field[self._index(row, column)].copy()

    def set_value(self, row: int, column: int, value: Vector2) -> None:
        """Store ``value`` in a cell. Raises InvalidCellError if out of range."""
        self._field[self._index(row, column)] = value.copy()

    def __getitem__(self, cell: Cell) -> Vector2:
        row, column = cell
        return self.get_value(row, column)

    def __setitem__(self, cell: Cell, value: Vector2) -> None:
        row, column = cell
        self.set_value(row, column, value)

    def get_value_at_position(self, position: Vector2) -> Vector2:
        """Vector of the cell under ``position``, or zero outside the field."""
        row, column = self.world_to_cell(position)
        if (row, column) == OUTSIDE:
            return Vector2(0.0, 0.0)
        return self.get_value(row, column)

    def set_value_at_position(self, position: Vector2, value: Vector2) -> None:
        """Set the cell under ``position``; does nothing outside the field."""
        row, column = self.world_to_cell(position)
        if (row, column) != OUTSIDE:
            self.set_value(row, column, value)

    @property
    def values(self) -> List[Vector2]:
        """Row-major copy of every cell."""
        return [value.copy() for value in self._field]

    # ------------------------------------------------------------------
    # Fill operations
    # ------------------------------------------------------------------

    def clear_all_values(self) -> None:
        self.fill_with_value(Vector2(0.0, 0.0))

    def fill_with_value(self, value: Vector2) -> None:
        for r in range(self._rows):
            for c in range(self._columns):
                self.set_value(r, c, value)

    def fill_with_random_values(self) -> None:
        """Random vector per cell, each axis an integer in [-100, 100)."""
        for r in range(self._rows):
            for c in range(self._columns):
                self.set_value(r, c, random_vector(self.rng, RANDOM_VECTOR_LOW, RANDOM_VECTOR_HIGH))

    def fill_with_perlin_noise(self) -> None:
        """Unit vector per cell at ``360 * perlin(r / rows, c / columns)`` degrees."""
        for r in range(self._rows):
            for c in range(self._columns):
                angle = 360.0 * self.noise(r / self._rows, c / self._columns)
                self.set_value(r, c, rotate(Vector2(1.0, 0.0), angle))

    # ------------------------------------------------------------------
    # Debug
    # ------------------------------------------------------------------

    def debug_shapes(self) -> List[DebugShape]:
        """Outline, cell grid and one centred arrow per non-zero cell."""
        shapes: List[DebugShape] = [DebugRect(self.bounds, FLOW_FIELD_COLOR)]
        for r in range(self._rows):
            for c in range(self._columns):
                cell = self.cell_rect(r, c)
                shapes.append(DebugRect(cell, FLOW_FIELD_COLOR))
                value = self._field[r * self._columns + c]
                if value.is_zero():
                    continue
                value = value.normalize()
                value = Vector2(value.x * self.scale.x, value.y * self.scale.y)
                offset = value / FLOW_ARROW_DIVISOR
                center = cell.center
                shapes.append(DebugArrow(center - offset, center + offset, FLOW_FIELD_COLOR))
        return shapes

    def __repr__(self) -> str:
        return f"FlowField(rows={self._rows}, columns={self._columns}, position={self.position!r})"

"""Tests for the FlowField grid."""

import math
import random

import pytest

from steering.exceptions import InvalidCellError
from steering.flow_field import FlowField, Rect
from steering.math_utils import Vector2
from steering.noise import PerlinNoise


@pytest.fixture
def field():
    return FlowField(2, 2)


class TestDimensions:
    def test_dimensions_clamped_to_one(self):
        field = FlowField(0, -4)
        assert (field.rows, field.columns) == (1, 1)
        field.rows = 0
        assert field.rows == 1
        assert len(field) == 1

    def test_resize_keeps_linear_values(self, field):
        """Growing 2x2 to 3x3 keeps indices 0-3 and zero-fills the rest."""
        for i in range(4):
            field.set_value(i // 2, i % 2, Vector2(i + 1, 0))

        field.rows = 3
        field.columns = 3

        values = field.values
        assert len(values) == 9
        assert values[:4] == [Vector2(1, 0), Vector2(2, 0), Vector2(3, 0), Vector2(4, 0)]
        assert all(v == Vector2(0, 0) for v in values[4:])

    def test_shrink_truncates(self, field):
        field.fill_with_value(Vector2(1, 1))
        field.rows = 1
        assert field.values == [Vector2(1, 1), Vector2(1, 1)]


class TestCellAccess:
    def test_set_get_round_trip(self, field):
        field.set_value(1, 0, Vector2(3, -2))
        assert field.get_value(1, 0) == Vector2(3, -2)
        assert field[1, 0] == Vector2(3, -2)

    def test_item_assignment(self, field):
        field[0, 1] = Vector2(7, 7)
        assert field.get_value(0, 1) == Vector2(7, 7)

    def test_values_are_copied(self, field):
        stored = Vector2(1, 1)
        field.set_value(0, 0, stored)
        stored.x = 9
        returned = field.get_value(0, 0)
        returned.y = 9
        assert field.get_value(0, 0) == Vector2(1, 1)

    @pytest.mark.parametrize("row, column", [(-1, 0), (2, 0), (5, 5)])
    def test_invalid_cell_reports_indices(self, field, row, column):
        with pytest.raises(InvalidCellError) as excinfo:
            field.get_value(row, column)
        assert excinfo.value.row == row
        assert excinfo.value.column == column
        assert f"row {row} and column {column}" in str(excinfo.value)

    def test_invalid_set_raises(self, field):
        with pytest.raises(IndexError):
            field.set_value(-1, 0, Vector2(1, 1))


class TestPositionalAccess:
    def test_bounds_centred_on_position(self):
        field = FlowField(2, 4, position=Vector2(10, 10), scale=Vector2(2, 1))
        assert field.bounds == Rect(6, 9, 8, 2)

    def test_world_to_cell(self, field):
        assert field.world_to_cell(Vector2(-0.5, -0.5)) == (0, 0)
        assert field.world_to_cell(Vector2(0.5, -0.5)) == (0, 1)
        assert field.world_to_cell(Vector2(0.5, 0.5)) == (1, 1)
        assert field.world_to_cell(Vector2(-1, -1)) == (0, 0)

    def test_max_edge_is_outside(self, field):
        assert field.world_to_cell(Vector2(1, 0)) == (-1, -1)
        assert field.world_to_cell(Vector2(0, 1)) == (-1, -1)

    def test_outside_reads_zero_and_ignores_writes(self, field):
        field.fill_with_value(Vector2(1, 0))
        assert field.get_value_at_position(Vector2(5, 5)) == Vector2(0, 0)
        field.set_value_at_position(Vector2(5, 5), Vector2(9, 9))
        assert all(v == Vector2(1, 0) for v in field.values)

    def test_positional_round_trip(self, field):
        field.set_value_at_position(Vector2(0.5, -0.5), Vector2(0, 3))
        assert field.get_value(0, 1) == Vector2(0, 3)
        assert field.get_value_at_position(Vector2(0.9, -0.1)) == Vector2(0, 3)

    def test_point_just_inside_max_edge_maps_to_last_cell(self):
        field = FlowField(2, 3, scale=Vector2(0.1, 1))
        field[1, 0] = Vector2(9, 9)
        field[1, 2] = Vector2(0, 4)
        x = math.nextafter(field.bounds.x_max, -math.inf)

        assert field.bounds.contains(Vector2(x, 0.5))
        assert field.world_to_cell(Vector2(x, 0.5)) == (1, 2)
        assert field.get_value_at_position(Vector2(x, 0.5)) == Vector2(0, 4)
        assert field.get_value_at_position(Vector2(x, -0.5)) == Vector2(0, 0)

    def test_point_just_below_top_edge_maps_to_last_row(self):
        field = FlowField(3, 1, scale=Vector2(1, 0.1))
        y = math.nextafter(field.bounds.y_max, -math.inf)
        assert field.world_to_cell(Vector2(0, y)) == (2, 0)


class TestFills:
    def test_fill_and_clear(self, field):
        field.fill_with_value(Vector2(2, 2))
        assert all(v == Vector2(2, 2) for v in field.values)
        field.clear_all_values()
        assert all(v == Vector2(0, 0) for v in field.values)

    def test_random_fill_is_seeded(self):
        a = FlowField(3, 3, rng=random.Random(42))
        b = FlowField(3, 3, rng=random.Random(42))
        a.fill_with_random_values()
        b.fill_with_random_values()
        assert a.values == b.values
        assert all(-100 <= v.x < 100 and -100 <= v.y < 100 for v in a.values)

    def test_perlin_fill_gives_unit_vectors(self):
        field = FlowField(4, 5)
        field.fill_with_perlin_noise()
        for value in field.values:
            assert value.length() == pytest.approx(1.0)
        # perlin(0, 0) is 0.5, i.e. 180 degrees
        assert field.get_value(0, 0).to_tuple() == pytest.approx((-1.0, 0.0), abs=1e-4)

    def test_perlin_fill_uses_given_noise(self):
        field = FlowField(2, 3, noise=lambda x, y: 0.25)
        field.fill_with_perlin_noise()
        for value in field.values:
            assert value.to_tuple() == pytest.approx((0.0, 1.0), abs=1e-12)

    def test_seeded_perlin_fill_is_reproducible(self):
        a = FlowField(3, 4, noise=PerlinNoise(seed=11))
        b = FlowField(3, 4, noise=PerlinNoise(seed=11))
        a.fill_with_perlin_noise()
        b.fill_with_perlin_noise()
        assert [v.to_tuple() for v in a.values] == [v.to_tuple() for v in b.values]


class TestDebugShapes:
    def test_outline_grid_and_arrows(self, field):
        assert len(field.debug_shapes()) == 5
        field.fill_with_value(Vector2(1, 0))
        assert len(field.debug_shapes()) == 9

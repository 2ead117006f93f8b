"""Unit tests for the per-material update rules."""

import random

import pytest

from falling_sand import constants as c
from falling_sand.behavior import update_cell
from falling_sand.grid import Grid
from falling_sand.material import ElementClass, Material
from falling_sand.registry import new_particle
from falling_sand.scheduler import step_frame


class LowRandom(random.Random):
    """Every roll succeeds and every decay draw is zero."""

    def random(self):
        return 0.0


class HighRandom(random.Random):
    """Every roll fails and every decay draw is maximal."""

    def random(self):
        return 0.999999


def place(grid: Grid, x: int, y: int, material: Material):
    particle = new_particle(material)
    grid.set(x, y, particle)
    return particle


def lay_floor(grid: Grid) -> None:
    for x in range(grid.width):
        place(grid, x, 0, Material.Wall)


class TestSolid:
    """Test cases for sand movement."""

    def test_falls_straight_down(self, grid, rng):
        place(grid, 2, 2, Material.Sand)
        update_cell(grid, 2, 2, rng)
        assert grid.material_at(2, 1) == Material.Sand
        assert grid.is_empty(2, 2)

    def test_bottom_row_never_moves(self, grid, rng):
        place(grid, 2, 0, Material.Sand)
        update_cell(grid, 2, 0, rng)
        assert grid.material_at(2, 0) == Material.Sand

    def test_prefers_below_left(self):
        """Test that a blocked grain always slides to the left when both sides are open."""
        for seed in range(20):
            grid = Grid(5, 3)
            place(grid, 2, 0, Material.Sand)
            place(grid, 2, 1, Material.Sand)
            step_frame(grid, random.Random(seed))
            assert grid.material_at(1, 0) == Material.Sand
            assert grid.is_empty(3, 0)
            assert grid.is_empty(2, 1)

    def test_below_right_when_left_blocked(self, grid, rng):
        place(grid, 2, 0, Material.Sand)
        place(grid, 1, 0, Material.Sand)
        place(grid, 2, 1, Material.Sand)
        update_cell(grid, 2, 1, rng)
        assert grid.material_at(3, 0) == Material.Sand

    def test_wall_corner_blocks_diagonal(self, grid, rng):
        """Test that sand resting on a wall does not slip past its corner."""
        place(grid, 2, 0, Material.Wall)
        place(grid, 2, 1, Material.Sand)
        update_cell(grid, 2, 1, rng)
        assert grid.material_at(2, 1) == Material.Sand
        assert grid.is_empty(1, 0)
        assert grid.is_empty(3, 0)

    def test_sinks_through_water(self, rng):
        grid = Grid(1, 2)
        place(grid, 0, 0, Material.Water)
        place(grid, 0, 1, Material.Sand)
        step_frame(grid, rng)
        assert grid.material_at(0, 0) == Material.Sand
        assert grid.material_at(0, 1) == Material.Water

    def test_does_not_fall_off_the_edge(self, rng):
        grid = Grid(1, 2)
        place(grid, 0, 0, Material.Wall)
        place(grid, 0, 1, Material.Sand)
        step_frame(grid, rng)
        assert grid.material_at(0, 1) == Material.Sand


class TestLiquid:
    """Test cases for water and oil movement."""

    def test_spreads_left_on_floor(self, grid, rng):
        lay_floor(grid)
        place(grid, 2, 1, Material.Water)
        update_cell(grid, 2, 1, rng)
        assert grid.material_at(1, 1) == Material.Water
        assert grid.is_empty(2, 1)

    def test_spreads_right_when_left_blocked(self, grid, rng):
        lay_floor(grid)
        place(grid, 1, 1, Material.Wall)
        place(grid, 2, 1, Material.Water)
        update_cell(grid, 2, 1, rng)
        assert grid.material_at(3, 1) == Material.Water

    @pytest.mark.parametrize("material", [Material.Water, Material.Oil])
    def test_bottom_row_never_moves(self, rng, material):
        """Test that a liquid resting on the bottom edge stays put."""
        grid = Grid(5, 3)
        place(grid, 2, 0, material)
        step_frame(grid, rng)
        assert grid.material_at(2, 0) == material
        assert grid.occupied() == 1

    def test_water_spreads_into_oil(self, rng):
        """Test that water trades places with oil beside it."""
        grid = Grid(3, 2)
        lay_floor(grid)
        place(grid, 0, 1, Material.Oil)
        place(grid, 1, 1, Material.Water)
        update_cell(grid, 1, 1, rng)
        assert [grid.material_at(x, 1) for x in range(3)] == [
            Material.Water, Material.Oil, Material.Empty,
        ]

    def test_spreads_into_gas(self, grid, rng):
        lay_floor(grid)
        place(grid, 1, 1, Material.Smoke)
        place(grid, 2, 1, Material.Water)
        update_cell(grid, 2, 1, rng)
        assert grid.material_at(1, 1) == Material.Water
        assert grid.material_at(2, 1) == Material.Smoke

    def test_wall_below_blocks_diagonal(self, grid, rng):
        """Test that a liquid on a wall post flows sideways, not past the corner."""
        place(grid, 2, 0, Material.Wall)
        place(grid, 2, 1, Material.Water)
        update_cell(grid, 2, 1, rng)
        assert grid.is_empty(1, 0)
        assert grid.is_empty(3, 0)
        assert grid.material_at(1, 1) == Material.Water

    def test_vertical_before_lateral(self, grid, rng):
        place(grid, 2, 2, Material.Water)
        update_cell(grid, 2, 2, rng)
        assert grid.material_at(2, 1) == Material.Water

    def test_water_sinks_through_oil(self, rng):
        grid = Grid(1, 2)
        place(grid, 0, 0, Material.Oil)
        place(grid, 0, 1, Material.Water)
        step_frame(grid, rng)
        assert grid.material_at(0, 0) == Material.Water
        assert grid.material_at(0, 1) == Material.Oil

    def test_oil_floats_on_water(self, rng):
        grid = Grid(1, 2)
        place(grid, 0, 0, Material.Water)
        place(grid, 0, 1, Material.Oil)
        step_frame(grid, rng)
        assert grid.material_at(0, 0) == Material.Water
        assert grid.material_at(0, 1) == Material.Oil

    def test_liquid_displaces_gas(self, grid, rng):
        place(grid, 2, 1, Material.Smoke)
        place(grid, 2, 2, Material.Water)
        update_cell(grid, 2, 2, rng)
        assert grid.material_at(2, 1) == Material.Water
        assert grid.material_at(2, 2) == Material.Smoke

    def test_does_not_enter_solid(self, rng):
        grid = Grid(1, 2)
        place(grid, 0, 0, Material.Sand)
        place(grid, 0, 1, Material.Water)
        step_frame(grid, rng)
        assert grid.material_at(0, 1) == Material.Water


class TestGas:
    """Test cases for smoke and flame movement."""

    def test_rises(self, grid, rng):
        place(grid, 2, 2, Material.Smoke)
        update_cell(grid, 2, 2, rng)
        assert grid.material_at(2, 3) == Material.Smoke

    def test_above_left_when_blocked(self, grid, rng):
        place(grid, 2, 3, Material.Sand)
        place(grid, 2, 2, Material.Smoke)
        update_cell(grid, 2, 2, rng)
        assert grid.material_at(1, 3) == Material.Smoke

    def test_wall_above_blocks_diagonal(self, grid, rng):
        place(grid, 2, 3, Material.Wall)
        place(grid, 2, 2, Material.Flame)
        update_cell(grid, 2, 2, rng)
        assert grid.material_at(1, 2) == Material.Flame
        assert grid.is_empty(1, 3)

    def test_only_moves_into_empty(self, rng):
        grid = Grid(1, 2)
        place(grid, 0, 0, Material.Smoke)
        place(grid, 0, 1, Material.Water)
        update_cell(grid, 0, 0, rng)
        assert grid.material_at(0, 0) == Material.Smoke

    def test_top_row_spreads_sideways(self, grid, rng):
        place(grid, 2, 4, Material.Smoke)
        update_cell(grid, 2, 4, rng)
        assert grid.material_at(1, 4) == Material.Smoke


class TestStatic:
    """Test cases for walls and wood."""

    @pytest.mark.parametrize("material", [Material.Wall, Material.Wood])
    def test_never_moves(self, grid, rng, material):
        place(grid, 2, 3, material)
        for _ in range(5):
            step_frame(grid, rng)
        assert grid.material_at(2, 3) == material
        assert grid.occupied() == 1


class TestDecay:
    """Test cases for smoke, fire and flame lifetimes."""

    @pytest.mark.parametrize("material, ceiling", [
        (Material.Smoke, c.SMOKE_DECAY),
        (Material.Fire, c.FIRE_DECAY),
        (Material.Flame, c.FLAME_DECAY),
    ])
    def test_decrement_within_ceiling(self, rng, material, ceiling):
        grid = Grid(1, 1)
        particle = place(grid, 0, 0, material)
        start = particle.life_time
        for _ in range(3):
            before = particle.life_time
            update_cell(grid, 0, 0, rng)
            assert before - ceiling <= particle.life_time <= before
        assert particle.life_time < start

    def test_max_decay_draw(self):
        grid = Grid(1, 1)
        particle = place(grid, 0, 0, Material.Smoke)
        update_cell(grid, 0, 0, HighRandom(0))
        assert particle.life_time == pytest.approx(c.SMOKE_LIFE_TIME - c.SMOKE_DECAY, abs=1e-5)

    @pytest.mark.parametrize("material", [Material.Smoke, Material.Flame])
    def test_expires_to_empty(self, rng, material):
        grid = Grid(1, 1)
        place(grid, 0, 0, material).life_time = 0.0
        update_cell(grid, 0, 0, rng)
        assert grid.is_empty(0, 0)

    def test_infinite_life_untouched(self, grid, rng):
        particle = place(grid, 2, 0, Material.Sand)
        update_cell(grid, 2, 0, rng)
        assert particle.life_time == 0.0
        assert grid.material_at(2, 0) == Material.Sand

    def test_fire_sometimes_leaves_smoke(self):
        """Test that expiring fire becomes smoke about one time in five."""
        rng = random.Random(99)
        trials = 4000
        smoke = 0
        for _ in range(trials):
            grid = Grid(1, 1)
            place(grid, 0, 0, Material.Fire).life_time = 0.0
            update_cell(grid, 0, 0, rng)
            if grid.material_at(0, 0) == Material.Smoke:
                smoke += 1
            else:
                assert grid.is_empty(0, 0)
        assert smoke / trials == pytest.approx(c.FIRE_SMOKE_CHANCE, abs=0.03)

    def test_fire_flickers(self, rng):
        grid = Grid(1, 1)
        fire = place(grid, 0, 0, Material.Fire)
        for _ in range(5):
            update_cell(grid, 0, 0, rng)
            assert fire.color in c.FIRE_SHADES
        assert grid.material_at(0, 0) == Material.Fire


class TestIgnition:
    """Test cases for oil and wood catching fire."""

    def test_wood_burns_static(self):
        grid = Grid(3, 3)
        wood = place(grid, 1, 1, Material.Wood)
        wood.velocity = (1.5, -2.0)
        place(grid, 0, 0, Material.Fire)
        update_cell(grid, 1, 1, LowRandom(0))
        burning = grid.get(1, 1)
        assert burning.material == Material.Fire
        assert burning.element_class == ElementClass.Static
        assert burning.velocity == (1.5, -2.0)
        assert burning.life_time == c.FIRE_LIFE_TIME

    def test_oil_burns_liquid(self):
        grid = Grid(3, 3)
        place(grid, 1, 1, Material.Oil)
        place(grid, 2, 2, Material.Flame)
        update_cell(grid, 1, 1, LowRandom(0))
        burning = grid.get(1, 1)
        assert burning.material == Material.Fire
        assert burning.element_class == ElementClass.Liquid

    def test_burning_oil_flows(self, rng):
        grid = Grid(3, 3)
        place(grid, 1, 2, Material.Oil)
        place(grid, 0, 2, Material.Fire)
        update_cell(grid, 1, 2, LowRandom(0))
        grid.reset_updated()
        update_cell(grid, 1, 2, rng)
        assert grid.material_at(1, 1) == Material.Fire
        assert grid.get(1, 1).element_class == ElementClass.Liquid

    def test_burning_wood_stays_put(self, rng):
        grid = Grid(3, 3)
        place(grid, 1, 2, Material.Wood)
        place(grid, 0, 2, Material.Fire)
        update_cell(grid, 1, 2, LowRandom(0))
        grid.reset_updated()
        update_cell(grid, 1, 2, rng)
        assert grid.material_at(1, 2) == Material.Fire

    def test_failed_roll_keeps_material(self):
        grid = Grid(3, 3)
        place(grid, 1, 1, Material.Wood)
        place(grid, 1, 2, Material.Fire)
        update_cell(grid, 1, 1, HighRandom(0))
        assert grid.material_at(1, 1) == Material.Wood

    @pytest.mark.parametrize("material", [Material.Wood, Material.Oil])
    def test_no_fire_no_ignition(self, material):
        grid = Grid(3, 1)
        place(grid, 0, 0, Material.Wall)
        place(grid, 1, 0, material)
        place(grid, 2, 0, Material.Wall)
        update_cell(grid, 1, 0, LowRandom(0))
        assert grid.material_at(1, 0) == material

    @pytest.mark.parametrize("material", [Material.Sand, Material.Water, Material.Wall])
    def test_non_flammable(self, material):
        grid = Grid(3, 1)
        place(grid, 0, 0, Material.Fire)
        place(grid, 1, 0, material)
        place(grid, 2, 0, Material.Fire)
        update_cell(grid, 1, 0, LowRandom(0))
        assert grid.material_at(1, 0) == material

    @pytest.mark.parametrize("material, expected", [
        (Material.Wood, c.WOOD_IGNITION_CHANCE),
        (Material.Oil, c.OIL_IGNITION_CHANCE),
    ])
    def test_ignition_rate(self, material, expected):
        """Test the ignition rate with exactly one burning neighbour."""
        rng = random.Random(2024)
        trials = 10_000
        ignited = 0
        for _ in range(trials):
            grid = Grid(2, 1)
            place(grid, 0, 0, Material.Fire)
            place(grid, 1, 0, material)
            step_frame(grid, rng)
            if grid.material_at(1, 0) == Material.Fire:
                ignited += 1
        assert ignited / trials == pytest.approx(expected, abs=0.02)

    def test_two_neighbours_roll_twice(self):
        """Test that each burning neighbour gets its own roll."""
        rng = random.Random(7)
        trials = 5000
        ignited = 0
        for _ in range(trials):
            grid = Grid(3, 1)
            place(grid, 0, 0, Material.Fire)
            place(grid, 1, 0, Material.Wood)
            place(grid, 2, 0, Material.Fire)
            update_cell(grid, 1, 0, rng)
            if grid.material_at(1, 0) == Material.Fire:
                ignited += 1
        assert ignited / trials == pytest.approx(0.75, abs=0.03)

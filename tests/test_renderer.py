"""Tests for supersampling, the parallel reduction and raster order.

Tests cover:
- Sub-sample grid coordinates
- Averages independent of thread scheduling
- Top-down and bottom-up emission order
- Frame buffer shape and agreement with the pixel stream
"""

from concurrent.futures import Executor, ThreadPoolExecutor

import numpy as np
import pytest

from pathtrace.config import RenderSettings
from pathtrace.core.vector import Vector3
from pathtrace.errors import ConfigError
from pathtrace.geometry.world import World
from pathtrace.renderer.raytracer import Renderer
from pathtrace.renderer.tone_mapping import encode_color


class ReversedExecutor(Executor):
    """Runs tasks last-to-first but, like any executor, returns results in order."""

    def __init__(self):
        self.ran = []

    def map(self, fn, *iterables, timeout=None, chunksize=1):
        items = list(zip(*iterables))
        results = [None] * len(items)
        for i in reversed(range(len(items))):
            self.ran.append(i)
            results[i] = fn(*items[i])
        return iter(results)


def settings(**overrides):
    base = dict(width=4, height=2, samples=2, max_depth=6, gamma=None, workers=4)
    base.update(overrides)
    return RenderSettings(**base)


class TestSampleGrid:
    """Tests for the sub-sample layout."""

    def test_offsets_cover_grid(self, camera):
        """Test that samples x samples offsets are generated."""
        renderer = Renderer(World(), camera, settings(samples=3))
        assert len(renderer.offsets) == 9
        assert set(renderer.offsets) == {(ax, ay) for ax in range(3) for ay in range(3)}

    def test_sample_coordinates(self, camera, monkeypatch):
        """Test (x*A + ax) / (width*A) and (y*A + ay) / (height*A)."""
        renderer = Renderer(World(), camera, settings(samples=2))
        seen = []
        monkeypatch.setattr(camera, "get_ray", lambda u, v: seen.append((u, v)) or type(camera).get_ray(camera, u, v))
        renderer.trace_sample(3, 1, 1, 0)
        assert seen == [(7 / 8, 2 / 4)]

    def test_single_sample_is_unaveraged(self, camera):
        """Test that one sample per pixel returns that sample's color."""
        world = World()
        renderer = Renderer(world, camera, settings(samples=1))
        expected = world.background(camera.get_ray(0.0, 0.0))
        assert renderer.sample_pixel(0, 0) == expected


class TestParallelReduction:
    """Tests that threads never change a pixel's value."""

    def test_threaded_matches_serial(self, mirror_world, camera):
        """Test that the pool gives exactly the serial average."""
        renderer = Renderer(mirror_world, camera, settings(width=8, height=4, samples=3))
        with ThreadPoolExecutor(max_workers=4) as executor:
            for x, y in [(0, 0), (3, 1), (4, 2), (7, 3)]:
                assert renderer.sample_pixel(x, y, executor) == renderer.sample_pixel(x, y)

    def test_scheduling_order_does_not_matter(self, mirror_world, camera):
        """Test that running sub-samples in reverse gives the same sum."""
        renderer = Renderer(mirror_world, camera, settings(width=8, height=4, samples=3))
        executor = ReversedExecutor()
        for x, y in [(2, 1), (5, 2)]:
            assert renderer.sample_pixel(x, y, executor) == renderer.sample_pixel(x, y)
        assert executor.ran[:9] == list(range(8, -1, -1))

    def test_average_of_gradient(self, camera):
        """Test that the pixel is the mean of its sub-sample colors."""
        world = World()
        renderer = Renderer(world, camera, settings(samples=2))
        total = Vector3.black()
        for ax, ay in renderer.offsets:
            total = total + renderer.trace_sample(1, 0, ax, ay)
        assert tuple(renderer.sample_pixel(1, 0)) == pytest.approx(tuple(total / 4))


class TestRasterOrder:
    """Tests for the order pixels are emitted in."""

    def expected_pixels(self, world, camera, rows, width=4, height=2):
        return [
            encode_color(world.background(camera.get_ray(x / width, y / height)), None)
            for y in rows
            for x in range(width)
        ]

    def test_top_row_first(self, camera):
        """Test that rows run top to bottom and columns left to right."""
        world = World()
        renderer = Renderer(world, camera, settings(samples=1))
        assert list(renderer.render()) == self.expected_pixels(world, camera, [1, 0])

    def test_bottom_up(self, camera):
        """Test that bottom_up flips the row order."""
        world = World()
        renderer = Renderer(world, camera, settings(samples=1, bottom_up=True))
        assert list(renderer.render()) == self.expected_pixels(world, camera, [0, 1])

    def test_pixel_count(self, mirror_world, camera):
        """Test that exactly width x height triples come out."""
        renderer = Renderer(mirror_world, camera, settings(width=5, height=3, samples=1))
        pixels = list(renderer.render())
        assert len(pixels) == 15
        assert all(0 <= c <= 255 for px in pixels for c in px)

    def test_frame_matches_stream(self, mirror_world, camera):
        """Test that render_frame lays out the same pixels as render()."""
        renderer = Renderer(mirror_world, camera, settings(width=5, height=3, samples=2, gamma=2.0))
        frame = renderer.render_frame()
        assert frame.shape == (3, 5, 3)
        assert frame.dtype == np.uint8
        assert frame.reshape(-1, 3).tolist() == [list(px) for px in renderer.render()]

    def test_diffuse_scene_renders(self, matte, camera):
        """Test a scene that draws random numbers on worker threads."""
        from pathtrace.geometry.sphere import Sphere

        world = World([Sphere(Vector3(0.0, 0.0, -1.0), 0.5, matte)])
        renderer = Renderer(world, camera, settings(samples=2, seed=11))
        assert renderer.render_frame().shape == (2, 4, 3)

    def test_seeded_renderers_do_not_interfere(self, matte, camera):
        """Test that two renderers with one seed draw identical streams when interleaved."""
        from pathtrace.geometry.sphere import Sphere

        world = World([Sphere(Vector3(0.0, 0.0, -1.0), 0.5, matte)])
        first = Renderer(world, camera, settings(samples=2, seed=11))
        second = Renderer(world, camera, settings(samples=2, seed=11))
        a = [first.sample_pixel(2, 1)]
        b = [second.sample_pixel(2, 1)]
        a.append(first.sample_pixel(2, 1))
        b.append(second.sample_pixel(2, 1))
        assert a == b


class TestValidation:
    """Tests that bad settings are refused up front."""

    @pytest.mark.parametrize("overrides", [
        {"width": 0},
        {"height": -1},
        {"samples": 0},
        {"max_depth": -1},
        {"workers": 0},
        {"gamma": 0.0},
    ])
    def test_invalid_settings(self, camera, overrides):
        """Test that the renderer rejects invalid settings."""
        with pytest.raises(ConfigError):
            Renderer(World(), camera, settings(**overrides))

import numpy as np
import pytest

from fractol.formula import MAX_ITER, julia_iterations, mandelbrot_iterations

POINTS = [(-2.0, -2.0), (-0.75, 0.1), (0.3, 0.5), (0.25, 0.0), (-1.0, 0.3), (0.4, -0.6)]


def test_origin_is_in_mandelbrot_set():
    assert mandelbrot_iterations(0.0, 0.0) == MAX_ITER


def test_far_point_escapes_after_one_step():
    assert mandelbrot_iterations(2.0, 2.0) == 1


def test_julia_start_outside_radius_never_iterates():
    assert julia_iterations(3.0, 0.0, 0.0, 0.0) == 0


@pytest.mark.parametrize("x, y", POINTS)
def test_counts_within_bounds(x, y):
    assert 0 <= mandelbrot_iterations(x, y) <= MAX_ITER
    assert 0 <= julia_iterations(x, y, -0.8, 0.156) <= MAX_ITER


@pytest.mark.parametrize("x, y", POINTS)
def test_julia_from_origin_matches_mandelbrot(x, y):
    assert julia_iterations(0.0, 0.0, x, y) == mandelbrot_iterations(x, y)


@pytest.mark.parametrize("x, y", POINTS)
def test_mandelbrot_conjugate_symmetry(x, y):
    assert mandelbrot_iterations(x, y) == mandelbrot_iterations(x, -y)


@pytest.mark.parametrize("x, y", POINTS)
def test_julia_point_symmetry(x, y):
    assert julia_iterations(x, y, 0.285, 0.01) == julia_iterations(-x, -y, 0.285, 0.01)


def test_array_input_matches_scalars():
    xs = np.array([p[0] for p in POINTS])
    ys = np.array([p[1] for p in POINTS])
    counts = mandelbrot_iterations(xs, ys)
    assert counts.shape == xs.shape
    assert counts.tolist() == [mandelbrot_iterations(x, y) for x, y in POINTS]
    jcounts = julia_iterations(xs, ys, -0.4, 0.6)
    assert jcounts.tolist() == [julia_iterations(x, y, -0.4, 0.6) for x, y in POINTS]


def test_grid_broadcasting():
    xs = np.linspace(-2.0, 2.0, 5)
    ys = np.linspace(-2.0, 2.0, 4)[:, None]
    counts = mandelbrot_iterations(xs, ys)
    assert counts.shape == (4, 5)
    assert counts[1, 2] == mandelbrot_iterations(xs[2], ys[1, 0])
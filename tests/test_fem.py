"""Tests for the 1-D boundary value solver."""

import numpy as np
import pytest

from scicalc.core.errors import InvalidArgument
from scicalc.solvers.fem import assemble_stiffness, solve_fem


class TestStiffness:
    def test_structure(self):
        K = assemble_stiffness(4)
        assert K[0].tolist() == [1, 0, 0, 0]
        assert K[1].tolist() == [1, -2, 1, 0]
        assert K[3].tolist() == [0, 0, 0, 1]

    def test_too_small(self):
        with pytest.raises(InvalidArgument):
            assemble_stiffness(2)


class TestSolveFEM:
    def test_quadratic_solution_is_exact(self):
        # u'' = 2, u(0) = 0, u(1) = 1  ->  u = x²
        nodes = np.linspace(0.0, 1.0, 11)
        u = solve_fem(lambda x: 2.0, nodes, (0.0, 1.0)).unwrap()
        assert np.allclose(u, nodes**2, atol=1e-12)

    def test_linear_solution(self):
        nodes = [0.0, 1.0, 2.0, 3.0]
        u = solve_fem(lambda x: 0.0, nodes, (1.0, 4.0)).unwrap()
        assert u == pytest.approx([1.0, 2.0, 3.0, 4.0])

    def test_sine_source(self):
        # u'' = -π² sin(πx), zero boundaries  ->  u = sin(πx)
        nodes = np.linspace(0.0, 1.0, 101)
        u = solve_fem(lambda x: -np.pi**2 * np.sin(np.pi * x), nodes, (0.0, 0.0)).unwrap()
        assert np.allclose(u, np.sin(np.pi * nodes), atol=2e-4)

    def test_non_uniform_nodes(self):
        with pytest.raises(InvalidArgument):
            solve_fem(lambda x: 0.0, [0.0, 0.1, 0.5], (0.0, 1.0))

    def test_bad_boundary_conditions(self):
        with pytest.raises(InvalidArgument):
            solve_fem(lambda x: 0.0, [0.0, 0.5, 1.0], (0.0,))

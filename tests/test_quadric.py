"""Unit tests for general quadric distance queries.

Tests cover:
- Quadrics equivalent to spheres and planes
- Linear fallback when the quadratic term vanishes along the ray
- Negative leading coefficients (cones, hyperboloids)
- Cross terms
- Ray coefficients against direct evaluation
"""

import math

import pytest
import taichi as ti


def _quadric(a=0.0, b=0.0, c=0.0, d=0.0, e=0.0, f=0.0, g=0.0, h=0.0, j=0.0, k=0.0):
    from csgsurface.geometry.surfaces import Quadric

    return Quadric(a, b, c, d, e, f, g, h, j, k)


class TestQuadricFunctions:
    """Tests for the quadric Taichi functions."""

    def test_quadric_value(self):
        """Test every term of the polynomial is evaluated."""
        from csgsurface.core.ray import vec3
        from csgsurface.geometry.quadric import QuadricParams, quadric_value

        result = ti.field(dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            quadric = QuadricParams(
                square=vec3(1.0, 2.0, 3.0),
                cross=vec3(4.0, 5.0, 6.0),
                linear=vec3(7.0, 8.0, 9.0),
                constant=10.0,
            )
            result[None] = quadric_value(vec3(1.0, 2.0, 3.0), quadric)

        test_kernel()
        # 1 + 8 + 27 + 4*2 + 5*6 + 6*3 + 7 + 16 + 27 + 10
        assert abs(result[None] - 152.0) < 1e-12


class TestQuadricDistance:
    """Tests for distance_to_surface on quadrics."""

    def test_sphere_as_quadric(self):
        """Test x^2 + y^2 + z^2 - 1 = 0 matches the unit sphere."""
        from csgsurface.solver.distance import distance_to_surface

        quadric = _quadric(a=1.0, b=1.0, c=1.0, k=-1.0)
        assert distance_to_surface(quadric, (-5.0, 0.0, 0.0), (1.0, 0.0, 0.0)) == 4.0

    def test_plane_as_quadric(self):
        """Test x - 2 = 0 falls back to the linear solution."""
        from csgsurface.solver.distance import distance_to_surface

        quadric = _quadric(g=1.0, k=-2.0)
        assert distance_to_surface(quadric, (0.0, 0.0, 0.0), (1.0, 0.0, 0.0)) == 2.0

    def test_plane_as_quadric_parallel(self):
        """Test the linear fallback keeps the parallel-ray policy."""
        from csgsurface.solver.distance import NO_INTERSECTION, distance_to_surface

        quadric = _quadric(g=1.0, k=-2.0)
        result = distance_to_surface(quadric, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
        assert result is NO_INTERSECTION

    def test_paraboloid_along_axis(self):
        """Test z = x^2 + y^2 hit along its axis, where a vanishes."""
        from csgsurface.solver.distance import intersect_surface

        quadric = _quadric(a=1.0, b=1.0, j=-1.0)
        hit = intersect_surface(quadric, (0.0, 0.0, -1.0), (0.0, 0.0, 1.0))
        assert hit.distance == 1.0
        assert hit.point == (0.0, 0.0, 0.0)

    def test_cone_negative_leading_coefficient(self):
        """Test x^2 + y^2 - z^2 = 0 along -z, where a = -1."""
        from csgsurface.solver.distance import distance_to_surface

        quadric = _quadric(a=1.0, b=1.0, c=-1.0)
        result = distance_to_surface(quadric, (0.5, 0.0, 5.0), (0.0, 0.0, -1.0))
        assert abs(result - 4.5) < 1e-12

    def test_cross_term(self):
        """Test xy = 1 along the unnormalized diagonal (1, 1, 0)."""
        from csgsurface.solver.distance import intersect_surface

        quadric = _quadric(d=1.0, k=-1.0)
        hit = intersect_surface(quadric, (0.0, 0.0, 0.0), (1.0, 1.0, 0.0))
        assert abs(hit.t - 1.0) < 1e-12
        assert abs(hit.distance - math.sqrt(2.0)) < 1e-12

    def test_no_real_roots(self):
        """Test a ray missing an ellipsoid."""
        from csgsurface.solver.distance import NO_INTERSECTION, distance_to_surface

        quadric = _quadric(a=1.0, b=4.0, c=9.0, k=-1.0)
        result = distance_to_surface(quadric, (-5.0, 1.0, 0.0), (1.0, 0.0, 0.0))
        assert result is NO_INTERSECTION

    def test_ellipsoid_semi_axis(self):
        """Test x^2 + 4y^2 + 9z^2 = 1 along y reaches the semi-axis 1/2."""
        from csgsurface.solver.distance import distance_to_surface

        quadric = _quadric(a=1.0, b=4.0, c=9.0, k=-1.0)
        result = distance_to_surface(quadric, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
        assert abs(result - 0.5) < 1e-12

    def test_ray_coefficients_match_evaluation(self):
        """Test a t^2 + b t + c equals the implicit function along the ray."""
        from csgsurface.solver.distance import evaluate_surface, ray_coefficients

        quadric = _quadric(1.0, -2.0, 0.5, 0.3, -0.7, 1.1, 2.0, -1.0, 0.25, -3.0)
        origin = (0.4, -1.2, 2.0)
        direction = (0.3, 0.9, -0.5)
        a, b, c = ray_coefficients(quadric, origin, direction)
        for t in (0.0, 0.5, 1.0, 2.5, -1.5):
            point = tuple(o + t * v for o, v in zip(origin, direction))
            expected = evaluate_surface(quadric, point)
            assert abs(a * t * t + b * t + c - expected) < 1e-9


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

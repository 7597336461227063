"""Unit tests for the ray module.

Tests cover:
- Ray dataclass, make_ray and ray_at
- Vector length utilities in double precision
- Dot product and overflow-safe normalization
"""

import pytest
import taichi as ti


class TestRayBasics:
    """Tests for Ray dataclass and basic operations."""

    def test_ray_at_origin(self):
        """Test ray_at returns origin when t=0."""
        from csgsurface.core.ray import Ray, ray_at, vec3

        result = ti.Vector.field(3, dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            ray = Ray(origin=vec3(1.0, 2.0, 3.0), direction=vec3(0.0, 0.0, -1.0))
            result[None] = ray_at(ray, 0.0)

        test_kernel()
        r = result[None]
        assert abs(r[0] - 1.0) < 1e-12
        assert abs(r[1] - 2.0) < 1e-12
        assert abs(r[2] - 3.0) < 1e-12

    def test_ray_at_positive_t(self):
        """Test ray_at computes correct point along ray."""
        from csgsurface.core.ray import Ray, ray_at, vec3

        result = ti.Vector.field(3, dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            ray = Ray(origin=vec3(0.0, 0.0, 0.0), direction=vec3(1.0, 0.0, 0.0))
            result[None] = ray_at(ray, 5.0)

        test_kernel()
        r = result[None]
        assert abs(r[0] - 5.0) < 1e-12
        assert abs(r[1]) < 1e-12
        assert abs(r[2]) < 1e-12

    def test_ray_at_negative_t(self):
        """Test ray_at handles negative t (behind origin)."""
        from csgsurface.core.ray import Ray, ray_at, vec3

        result = ti.Vector.field(3, dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            ray = Ray(origin=vec3(0.0, 0.0, 0.0), direction=vec3(0.0, 1.0, 0.0))
            result[None] = ray_at(ray, -3.0)

        test_kernel()
        r = result[None]
        assert abs(r[1] - (-3.0)) < 1e-12

    def test_make_ray(self):
        """Test make_ray convenience function."""
        from csgsurface.core.ray import make_ray, ray_at, vec3

        result = ti.Vector.field(3, dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            ray = make_ray(vec3(1.0, 1.0, 1.0), vec3(0.0, 2.0, 0.0))
            result[None] = ray_at(ray, 0.5)

        test_kernel()
        r = result[None]
        assert abs(r[0] - 1.0) < 1e-12
        assert abs(r[1] - 2.0) < 1e-12
        assert abs(r[2] - 1.0) < 1e-12

    def test_ray_at_keeps_double_precision(self):
        """Test that a 1e-12 step survives next to a coordinate of 1."""
        from csgsurface.core.ray import Ray, ray_at, vec3

        result = ti.Vector.field(3, dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            ray = Ray(origin=vec3(1.0, 0.0, 0.0), direction=vec3(1.0, 0.0, 0.0))
            result[None] = ray_at(ray, 1e-12)

        test_kernel()
        assert result[None][0] > 1.0


class TestVectorUtilities:
    """Tests for dot product, length and normalization helpers."""

    def test_length(self):
        """Test Euclidean length of a 3-4-0 vector."""
        from csgsurface.core.ray import length, vec3

        result = ti.field(dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            result[None] = length(vec3(3.0, 4.0, 0.0))

        test_kernel()
        assert abs(result[None] - 5.0) < 1e-12

    def test_length_squared(self):
        """Test squared length avoids the square root."""
        from csgsurface.core.ray import length_squared, vec3

        result = ti.field(dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            result[None] = length_squared(vec3(1.0, 2.0, 2.0))

        test_kernel()
        assert abs(result[None] - 9.0) < 1e-12

    def test_dot(self):
        """Test the dot product of two non-orthogonal vectors."""
        from csgsurface.core.ray import dot, vec3

        result = ti.field(dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            result[None] = dot(vec3(1.0, 2.0, 3.0), vec3(-2.0, 0.5, 4.0))

        test_kernel()
        assert abs(result[None] - 11.0) < 1e-12

    def test_normalize(self):
        """Test normalize splits a 3-4-0 vector into unit direction and length."""
        from csgsurface.core.ray import normalize, vec3

        unit = ti.Vector.field(3, dtype=ti.f64, shape=())
        norm = ti.field(dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            u, n = normalize(vec3(3.0, -4.0, 0.0))
            unit[None] = u
            norm[None] = n

        test_kernel()
        u = unit[None]
        assert abs(u[0] - 0.6) < 1e-12
        assert abs(u[1] - (-0.8)) < 1e-12
        assert abs(u[2]) < 1e-12
        assert abs(norm[None] - 5.0) < 1e-12

    def test_normalize_extreme_magnitudes(self):
        """Test normalize neither overflows nor underflows when squaring."""
        from csgsurface.core.ray import normalize, vec3

        unit = ti.Vector.field(3, dtype=ti.f64, shape=2)
        norm = ti.field(dtype=ti.f64, shape=2)

        @ti.kernel
        def test_kernel():
            u, n = normalize(vec3(3e300, 4e300, 0.0))
            unit[0] = u
            norm[0] = n
            u, n = normalize(vec3(0.0, 3e-300, -4e-300))
            unit[1] = u
            norm[1] = n

        test_kernel()
        assert abs(unit[0][0] - 0.6) < 1e-12
        assert abs(unit[0][1] - 0.8) < 1e-12
        assert norm[0] == pytest.approx(5e300, rel=1e-12)
        assert abs(unit[1][1] - 0.6) < 1e-12
        assert abs(unit[1][2] - (-0.8)) < 1e-12
        assert norm[1] == pytest.approx(5e-300, rel=1e-12)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

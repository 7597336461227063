"""Pytest configuration for csgsurface tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    from csgsurface.config import init_runtime

    init_runtime(random_seed=42)
    yield


@pytest.fixture
def unit_sphere():
    """Sphere of radius 1 centered at the origin."""
    from csgsurface.geometry.surfaces import Sphere

    return Sphere(x=0.0, y=0.0, z=0.0, radius=1.0)

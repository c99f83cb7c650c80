"""Shared fixtures for the Flaghack test suite.

Forces headless pygame and provides the marker layouts the ley tests reuse.
"""

import math
import os

# Must be set before pygame initialises a display.
os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ["SDL_AUDIODRIVER"] = "dummy"

import pytest


def ring(count, radius, center=(0.0, 0.0), jitter=None):
    """Points evenly spaced on a circle; jitter(i) scales the i-th radius."""
    cx, cy = center
    points = []
    for i in range(count):
        angle = i * 2.0 * math.pi / count
        r = radius * (jitter(i) if jitter else 1.0)
        points.append((cx + math.cos(angle) * r, cy + math.sin(angle) * r))
    return points


def far_noise(count=40):
    """Markers spaced far apart from each other and from the origin."""
    return [(1000.0 + i * 300.0, -2000.0 + (i % 3) * 500.0) for i in range(count)]


# ============================================================
# MARKER LAYOUTS
# ============================================================

@pytest.fixture
def pentagon40():
    """Regular pentagon, radius 40, centred on the origin."""
    return ring(5, 40.0)


@pytest.fixture
def jittered_pentagon():
    """Radius-60 pentagon with alternating +15% / -15% radius."""
    return ring(5, 60.0, jitter=lambda i: 1.15 if i % 2 == 0 else 0.85)


@pytest.fixture
def collinear5():
    return [(0.0, 0.0), (10.0, 0.0), (20.0, 0.0), (30.0, 0.0), (40.0, 0.0)]


@pytest.fixture
def noisy_pentagon(pentagon40):
    """Forty unrelated far-away markers followed by the radius-40 pentagon."""
    return far_noise() + pentagon40

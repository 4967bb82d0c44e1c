"""Shared fixtures for the fixedbody test suite."""

import math

import numpy as np
import pytest

from fixedbody import Body, NBodySimulation, SimConfig


def circular_binary(m1=1.0, m2=1.0e-3, a=1.0, G=1.0):
    """Two bodies on a circular orbit, centre of mass at rest at the origin."""
    M = m1 + m2
    v = math.sqrt(G * M / a)
    return [
        Body(m1, x=-a * m2 / M, vy=-v * m2 / M),
        Body(m2, x=a * m1 / M, vy=v * m1 / M),
    ]


@pytest.fixture
def cfg():
    return SimConfig(int_scale=1.0e16, initial_dt=0.01)


@pytest.fixture
def make_binary(cfg):
    def _make(**kwargs):
        return NBodySimulation(circular_binary(**kwargs), cfg=cfg)
    return _make


@pytest.fixture
def binary_sim(make_binary):
    return make_binary()


@pytest.fixture
def three_body_sim(cfg):
    bodies = [
        Body(1.0, x=0.0, y=0.0, z=0.0, vx=0.0, vy=-0.01, vz=0.0),
        Body(1.0e-3, x=1.0, y=0.0, z=0.0, vx=0.0, vy=1.0, vz=0.0),
        Body(1.0e-3, x=0.0, y=-2.0, z=0.1, vx=0.7, vy=0.0, vz=0.0),
    ]
    return NBodySimulation(bodies, cfg=cfg)


@pytest.fixture
def rng():
    return np.random.default_rng(12345)

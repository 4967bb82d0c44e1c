"""
This initialization file serves as the main entry point for the fixedbody package,
exposing its public API through a single namespace.

It re-exports the simulation host (Body, BodyView, NBodySimulation, SimConfig), the
integrator and its janus scheme, which evolves particle state on a fixed-point buffer
with a 4th-order symmetric composition, the fixed-point conversions, the direct-sum
gravity evaluator, and the diagnostics used to check conservation over long runs.
"""

from .sim_config import SimConfig
from .integrator_constants import IntegratorConstants
from .simulation_validator import SimulationValidator

from .body import Body
from .body_view import BodyView
from .simulation import NBodySimulation
from .integrator import Integrator
from .integration_scheme_base import IntegrationScheme
from .janus_scheme import JanusScheme

from .fixed_point import (
    to_fixed_point,
    to_floating_point,
    magnitude_limit,
    in_range,
)
from .forces import gravitational_acceleration, gravitational_force
from .geometry_cache import geometry_buffers
from .physics_utils import center_of_mass, remove_center_of_mass_velocity

from .diagnostics import Diagnostics


__all__ = [
    "SimConfig",
    "IntegratorConstants",
    "SimulationValidator",
    "Body",
    "BodyView",
    "NBodySimulation",
    "Integrator",
    "IntegrationScheme",
    "JanusScheme",
    "to_fixed_point",
    "to_floating_point",
    "magnitude_limit",
    "in_range",
    "gravitational_acceleration",
    "gravitational_force",
    "geometry_buffers",
    "center_of_mass",
    "remove_center_of_mass_velocity",
    "Diagnostics",
]

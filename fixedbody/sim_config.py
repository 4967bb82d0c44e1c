from __future__ import annotations
from dataclasses import dataclass
import math

"""
This configuration module defines the simulation parameters through the SimConfig dataclass. The fixed-point scale int_scale is the multiplier applied before truncation to integer: larger values shrink the truncation error of every drift and kick but reduce the position and velocity range that fits a 128-bit integer. The remaining fields set the initial clock (initial_time, initial_dt), the gravity evaluator (G, softening), the integrator mode, and the optional debug range check. The class provides copy for configuration inheritance and validate for rejecting unusable settings before a simulation is built.

"""
_ALLOWED_MODES = {
    "janus",
}

@dataclass
class SimConfig:
    int_scale:       float = 1.0e16
    initial_dt:      float = 0.01
    initial_time:    float = 0.0
    G:               float = 1.0
    softening:       float = 0.0
    integrator_mode: str = "janus"
    check_int_range: bool = False

    def copy(self) -> "SimConfig":
        new = object.__new__(SimConfig)
        new.__dict__ = dict(getattr(self, "__dict__", {}))
        return new

    def validate(self) -> bool:
        if self.integrator_mode not in _ALLOWED_MODES:
            print(f"[error] unknown integrator_mode {self.integrator_mode!r}; "
                  f"expected one of {sorted(_ALLOWED_MODES)}")
            return False
        scale = float(self.int_scale)
        if not (math.isfinite(scale) and scale > 0.0):
            print(f"[error] int_scale must be a positive finite number, got {self.int_scale}")
            return False
        if not math.isfinite(float(self.initial_dt)):
            print(f"[error] initial_dt must be finite, got {self.initial_dt}")
            return False
        if float(self.softening) < 0.0:
            print(f"[error] softening must be non-negative, got {self.softening}")
            return False
        return True

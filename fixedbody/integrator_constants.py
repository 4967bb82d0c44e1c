from __future__ import annotations

"""
This module centralizes the numerical constants of the integration subsystem. The IntegratorConstants class holds the five coefficients of the 4th-order, 9-stage symmetric composition used by the janus scheme together with the palindromic schedule built from them. The coefficients are fixed constants of the scheme and satisfy 2*(g1+g2+g3+g4)+g5 == 1; they are never derived at runtime. Run-time defaults such as the fixed-point scale and step size live in SimConfig.


"""


class IntegratorConstants:
    GAMMA1 = 0.39216144400731413928
    GAMMA2 = 0.33259913678935943860
    GAMMA3 = -0.70624617255763935981
    GAMMA4 = 0.082213596293550800230
    GAMMA5 = 0.79854399093482996340

    JANUS_SCHEDULE = (
        GAMMA1, GAMMA2, GAMMA3, GAMMA4, GAMMA5,
        GAMMA4, GAMMA3, GAMMA2, GAMMA1,
    )


__all__ = ["IntegratorConstants"]

"""Propellant tank holding xenon mass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class XenonTank:
    """Mass of xenon in a tank, in kilograms.

    An outside integrator reads ``mass``, applies the mass flow and writes the
    new value back.
    """

    mass: float = 1500.0
"""
Orchestrator Module - Home energy model scenarios.

Builds a model per scenario and compares scenarios through their
modelled bills.
"""

from .home_energy_model import HomeEnergyModel, ModelAccuracy, ScenarioComparison

__all__ = [
    "HomeEnergyModel",
    "ModelAccuracy",
    "ScenarioComparison",
]

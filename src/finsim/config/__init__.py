# src/finsim/config/__init__.py

from .loader import load_config
from .schemas import InitialSkillsConfig, SimulationConfig

__all__ = ["InitialSkillsConfig", "SimulationConfig", "load_config"]

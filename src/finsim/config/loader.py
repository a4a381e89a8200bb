# src/finsim/config/loader.py

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union, cast

from omegaconf import OmegaConf

from .schemas import SimulationConfig

logger = logging.getLogger(__name__)


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> SimulationConfig:
    """
    Builds a validated SimulationConfig.

    The schema defaults are the base layer, an optional YAML file is merged
    on top, then any overrides. Raises pydantic's ValidationError if the
    merged values do not fit the schema.
    """
    merged = OmegaConf.create(SimulationConfig().model_dump())

    if path is not None:
        logger.info(f"Loading simulation config from {path}")
        merged = OmegaConf.merge(merged, OmegaConf.load(path))

    if overrides:
        merged = OmegaConf.merge(merged, OmegaConf.create(overrides))

    container = cast(Dict[str, Any], OmegaConf.to_container(merged, resolve=True))
    return SimulationConfig.model_validate(container)

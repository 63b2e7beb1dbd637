"""
Dependencies - Skate Score Calculator
skatescore/core/dependencies.py

Cached shared instances for the API and scripts.
"""

from functools import lru_cache

from skatescore.config import get_settings
from skatescore.scoring.sov import ScaleOfValues


@lru_cache()
def get_scale_of_values() -> ScaleOfValues:
    """Get the cached Scale of Values, loaded once from SOV_PATH."""
    return ScaleOfValues.load(get_settings().SOV_PATH)

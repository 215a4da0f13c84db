"""
Runway surface classification utilities.

This module provides functions to classify runway surfaces into the
hard, soft and water buckets counted on the airport record.
"""

from typing import Optional, Dict
import logging

from ..parsers.constants import Surface

logger = logging.getLogger(__name__)

SURFACE_CLASSES: Dict[str, frozenset] = {
    'hard': frozenset({Surface.UNKNOWN, Surface.TRANSPARENT, Surface.ASPHALT, Surface.CONCRETE}),
    'soft': frozenset({Surface.TURF_OR_GRASS, Surface.DRY_LAKEBED, Surface.DIRT, Surface.GRAVEL,
                       Surface.SNOW_OR_ICE}),
    'water': frozenset({Surface.WATER}),
}

def classify_runway_surface(surface: Surface) -> Optional[str]:
    """
    Classify a runway surface into hard, soft or water.

    Args:
        surface: Decoded surface

    Returns:
        Classification string ('hard', 'soft', 'water') or None if unknown
    """
    for category, surfaces in SURFACE_CLASSES.items():
        if surface in surfaces:
            return category

    logger.debug(f"Unclassified runway surface: '{surface}'")
    return None


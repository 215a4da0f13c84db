"""
Magnetic variation providers.

Variation lookup is a black box function of position. The reader only
depends on MagVarProvider, ConstantMagVar is used when no model is
available.
"""

from abc import ABC, abstractmethod

from ..models.navpoint import NavPoint

class MagVarProvider(ABC):
    """Interface for magnetic variation lookup."""

    @abstractmethod
    def mag_var(self, position: NavPoint) -> float:
        """
        Magnetic variation at a position.

        Args:
            position: Geographic position

        Returns:
            Variation in degrees, east positive
        """
        pass


class ConstantMagVar(MagVarProvider):
    """Same variation everywhere."""

    def __init__(self, value: float = 0.0):
        self.value = value

    def mag_var(self, position: NavPoint) -> float:
        return self.value

    def __repr__(self):
        return f"ConstantMagVar(value={self.value})"

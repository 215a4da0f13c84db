import logging
from dataclasses import dataclass
from typing import Optional

from ..models.navpoint import NavPoint
from ..utils.magvar import MagVarProvider, ConstantMagVar

logger = logging.getLogger(__name__)

@dataclass
class ReaderContext:
    """
    State of the file being read, passed along with every row.

    The loader updates line_number before each row so that warnings can
    point at the offending line.
    """

    file_id: int = 0
    file_name: str = ""
    local_path: str = ""
    line_number: int = 0
    is_addon: bool = False
    is_3d: bool = False
    magvar: Optional[MagVarProvider] = None

    def __post_init__(self):
        if self.magvar is None:
            self.magvar = ConstantMagVar()

    def message_prefix(self) -> str:
        """Prefix for log messages: file and line."""
        return f"{self.file_name}:{self.line_number}:"


def read_position(latitude: float, longitude: float, context: ReaderContext, label: str) -> Optional[NavPoint]:
    """
    Position given in a row.

    Returns:
        The position or None, with a warning, if a coordinate is out of range
    """
    try:
        return NavPoint(latitude=latitude, longitude=longitude)
    except ValueError as e:
        logger.warning(f"{context.message_prefix()} Invalid {label} position: {e}")
        return None

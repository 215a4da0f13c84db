import logging
from typing import Optional

from ..models.pavement import PavementNode, PavementPolygon
from .rows import PavementHeaderRow, PavementNodeRow

logger = logging.getLogger(__name__)

class PavementAssembler:
    """
    Collects pavement node rows into a polygon with holes.

    The first ring is the boundary. A closing node ends the boundary and
    every following node belongs to a hole; a closing node inside a hole
    makes the next node start a new hole.

    The assembler is inactive until a pavement header is seen, so nodes
    following linear feature or boundary headers are not collected.
    """

    def __init__(self):
        self.polygon = PavementPolygon()
        self.header: Optional[PavementHeaderRow] = None
        self.collecting_boundary = True
        self.collecting_holes = False
        self.starting_new_hole = False

    @property
    def active(self) -> bool:
        return self.header is not None

    def start(self, header: PavementHeaderRow) -> None:
        """Begin a new polygon. Any pending polygon must be flushed first."""
        self.reset()
        self.header = header

    def add_node(self, row: PavementNodeRow) -> PavementNode:
        """
        Append the node of a pavement row to the polygon.

        Returns:
            The appended node
        """
        node = PavementNode(latitude=row.latitude, longitude=row.longitude,
                            control_latitude=row.control_latitude,
                            control_longitude=row.control_longitude)

        if self.collecting_boundary:
            self.polygon.add_boundary_node(node)
        elif self.collecting_holes:
            self.polygon.add_hole_node(node, new_hole=self.starting_new_hole)
            self.starting_new_hole = False

        if row.is_closing:
            if self.collecting_boundary:
                self.collecting_boundary = False
                self.collecting_holes = True
                self.starting_new_hole = True
            elif self.collecting_holes:
                self.starting_new_hole = True
        return node

    def flush(self) -> Optional[PavementPolygon]:
        """
        Hand over the assembled polygon and reset the assembler.

        Returns:
            The polygon or None if nothing was collected
        """
        polygon = None
        if not self.polygon.is_empty():
            polygon = self.polygon
        self.reset()
        return polygon

    def reset(self) -> None:
        self.polygon = PavementPolygon()
        self.header = None
        self.collecting_boundary = True
        self.collecting_holes = False
        self.starting_new_hole = False

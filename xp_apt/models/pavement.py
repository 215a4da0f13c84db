from dataclasses import dataclass, field
from typing import List, Optional

@dataclass
class PavementNode:
    """Polygon node with an optional bezier control point."""

    latitude: float
    longitude: float
    control_latitude: Optional[float] = None
    control_longitude: Optional[float] = None

    @property
    def has_control(self) -> bool:
        return self.control_latitude is not None and self.control_longitude is not None

    def to_list(self) -> list:
        if self.has_control:
            return [self.longitude, self.latitude, self.control_longitude, self.control_latitude]
        return [self.longitude, self.latitude]


@dataclass
class PavementPolygon:
    """
    Surface area given by one boundary ring and any number of hole rings.

    Rings are stored open, the last node connects back to the first.
    """

    boundary: List[PavementNode] = field(default_factory=list)
    holes: List[List[PavementNode]] = field(default_factory=list)

    def add_boundary_node(self, node: PavementNode) -> None:
        self.boundary.append(node)

    def add_hole_node(self, node: PavementNode, new_hole: bool) -> None:
        """Append a node to the last hole, starting a new hole first if requested or none exists."""
        if new_hole or not self.holes:
            self.holes.append([])
        self.holes[-1].append(node)

    def is_empty(self) -> bool:
        return not self.boundary

    def degenerate_holes(self) -> List[int]:
        """Indexes of holes with fewer than three nodes."""
        return [index for index, hole in enumerate(self.holes) if len(hole) < 3]

    def to_dict(self) -> dict:
        """
        Geometry serialization used by the storage backends.

        Nodes are [lon, lat] or [lon, lat, ctrl_lon, ctrl_lat] lists.
        """
        return {
            'boundary': [node.to_list() for node in self.boundary],
            'holes': [[node.to_list() for node in hole] for hole in self.holes],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'PavementPolygon':
        def to_node(values: list) -> PavementNode:
            if len(values) >= 4:
                return PavementNode(latitude=values[1], longitude=values[0],
                                    control_latitude=values[3], control_longitude=values[2])
            return PavementNode(latitude=values[1], longitude=values[0])

        return cls(
            boundary=[to_node(values) for values in data.get('boundary', [])],
            holes=[[to_node(values) for values in hole] for hole in data.get('holes', [])],
        )


@dataclass
class Apron:
    """Pavement polygon written as apron row."""

    apron_id: int
    airport_id: Optional[int]
    surface: str = "UNKNOWN"
    geometry: PavementPolygon = field(default_factory=PavementPolygon)

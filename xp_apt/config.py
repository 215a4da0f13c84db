import json
import logging
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Any, Dict, List

from .utils.filters import AirportFilter
from .utils.magvar import ConstantMagVar, MagVarProvider

logger = logging.getLogger(__name__)

@dataclass
class ReaderOptions:
    """
    Options for reading apt.dat files.

    Options can be loaded from a JSON file whose keys are the field names:

        {"include_airports": ["ED*"], "exclude_airports": ["EDXX"], "is_addon": false}
    """

    include_airports: List[str] = field(default_factory=list)
    exclude_airports: List[str] = field(default_factory=list)
    is_addon: bool = False
    is_3d: bool = False
    mag_var: float = 0.0
    progress_interval: int = 1000
    cache_dir: str = "cache"
    http_timeout: float = 30.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ReaderOptions':
        """Create options from a dictionary, unknown keys are ignored with a warning."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown options: {', '.join(sorted(unknown))}")
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def from_file(cls, path: str) -> 'ReaderOptions':
        """
        Load options from a JSON file.

        Args:
            path: Path to the JSON file

        Returns:
            ReaderOptions with defaults for missing keys
        """
        with open(Path(path)) as f:
            data = json.load(f)
        logger.info(f"Loaded options from {path}")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def create_filter(self) -> AirportFilter:
        return AirportFilter(include=self.include_airports, exclude=self.exclude_airports)

    def create_magvar(self) -> MagVarProvider:
        return ConstantMagVar(self.mag_var)

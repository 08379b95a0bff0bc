# core/config.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from facility.slot import SizeClass

Edge = Tuple[int, int]


@dataclass
class FacilityConfig:
    slots: List[Tuple[int, SizeClass]]
    edges: List[Edge] = field(default_factory=list)  # over 0-based positions
    linear_adjacency: bool = True  # add the chain 0-1-...-(n-1) automatically

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FacilityConfig":
        """
        Build a config from plain data:
            {"slots": [{"id": 1, "size": "small"}, ...],
             "edges": [[0, 1], ...],
             "linear_adjacency": true}
        """
        slots = [
            (int(s["id"]), SizeClass.parse(s["size"]))
            for s in data.get("slots", [])
        ]
        edges = [(int(u), int(v)) for u, v in data.get("edges", [])]
        return cls(
            slots=slots,
            edges=edges,
            linear_adjacency=bool(data.get("linear_adjacency", True)),
        )


def default_facility_config() -> FacilityConfig:
    """Five slots on a single linear floor."""
    return FacilityConfig(
        slots=[
            (1, SizeClass.SMALL),
            (2, SizeClass.MEDIUM),
            (3, SizeClass.LARGE),
            (4, SizeClass.MEDIUM),
            (5, SizeClass.SMALL),
        ],
    )

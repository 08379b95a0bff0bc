import threading
from dataclasses import dataclass, field

from allocation.reservation_table import ReservationTable
from core.config import FacilityConfig
from facility.slot_index import SlotIndex
from facility.slot_registry import SlotRegistry
from planning.floor_graph import FloorGraph


@dataclass
class FacilityState:
    """All mutable parking state of one facility session.

    Created once at startup and handed to every component that needs it.
    `lock` serializes mutations and gives readers a consistent snapshot.
    """

    registry: SlotRegistry
    index: SlotIndex
    reservations: ReservationTable
    graph: FloorGraph
    lock: threading.RLock = field(default_factory=threading.RLock)

    @classmethod
    def from_config(cls, config: FacilityConfig) -> "FacilityState":
        registry = SlotRegistry(config.slots)

        if config.linear_adjacency:
            graph = FloorGraph.linear(len(registry), config.edges)
        else:
            graph = FloorGraph(len(registry), config.edges)

        return cls(
            registry=registry,
            index=SlotIndex(registry),
            reservations=ReservationTable(),
            graph=graph,
        )

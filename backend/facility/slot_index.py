import bisect
from typing import Dict, List, Optional

from facility.slot import SizeClass, Slot
from facility.slot_registry import SlotRegistry


class SlotIndex:
    """
    Ordered index over a SlotRegistry.

    Keeps a sorted array of slot ids (binary search) and, per size class, the
    sorted ids of free slots. The free lists are rebuilt lazily whenever the
    registry version moves, so a query never reads state older than the last
    successful occupy/vacate.
    """

    def __init__(self, registry: SlotRegistry):
        self.registry = registry
        self._ids: List[int] = [slot.slot_id for slot in registry.all()]
        self._free_by_size: Dict[SizeClass, List[int]] = {}
        self._built_version = -1

    def _refresh(self) -> None:
        if self._built_version == self.registry.version:
            return

        free: Dict[SizeClass, List[int]] = {size: [] for size in SizeClass}
        for slot in self.registry.all():
            if not slot.is_occupied:
                # registry.all() is ascending, so each list stays sorted
                free[slot.size].append(slot.slot_id)

        self._free_by_size = free
        self._built_version = self.registry.version

    def ordered_ids(self) -> List[int]:
        return list(self._ids)

    def find(self, slot_id: int) -> Optional[Slot]:
        i = bisect.bisect_left(self._ids, slot_id)
        if i < len(self._ids) and self._ids[i] == slot_id:
            return self.registry.get(slot_id)
        return None

    def first_available(self, size: SizeClass) -> Optional[Slot]:
        """Lowest-id unoccupied slot of the given size, or None."""
        self._refresh()
        candidates = self._free_by_size.get(size, [])
        if not candidates:
            return None
        return self.registry.get(candidates[0])

    def free_count(self, size: SizeClass) -> int:
        self._refresh()
        return len(self._free_by_size.get(size, []))

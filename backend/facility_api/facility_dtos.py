from typing import Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, Field

# --- Request DTOs ---

class SlotConfigDTO(BaseModel):
    id: int = Field(gt=0)
    size: Literal["small", "medium", "large"]

class FacilityConfigDTO(BaseModel):
    slots: List[SlotConfigDTO]
    # edges between 1-based slot numbers (same numbering as /facility/path)
    edges: List[Tuple[int, int]] = Field(default_factory=list)
    linear_adjacency: bool = True

class AllocateRequest(BaseModel):
    vehicleID: str
    # validated by the core so unknown values come back as INVALID_TYPE
    sizeClass: str = ""
    vehicleKind: str

class ScheduleRequest(BaseModel):
    entries: List[int]
    exits: List[int]

# --- Response DTOs ---

class ErrorDTO(BaseModel):
    code: str
    message: str

class SlotDTO(BaseModel):
    id: int
    size: str
    occupied: bool
    occupantID: str

class ListSlotsResponse(BaseModel):
    slots: List[SlotDTO]

class SizeSummaryDTO(BaseModel):
    total: int
    free: int

class SummaryResponse(BaseModel):
    total: int
    free: int
    occupied: int
    parked_vehicles: int
    by_size: Dict[str, SizeSummaryDTO]

class AllocateResponse(BaseModel):
    ok: bool
    slotIDs: List[int] = Field(default_factory=list)
    error: Optional[ErrorDTO] = None

class ReleaseResponse(BaseModel):
    ok: bool
    freedSlotIDs: List[int] = Field(default_factory=list)
    error: Optional[ErrorDTO] = None

class VehicleResponse(BaseModel):
    vehicleID: str
    slotIDs: List[int]

class PathResponse(BaseModel):
    ok: bool
    hops: Optional[int] = None
    route: List[int] = Field(default_factory=list)
    error: Optional[ErrorDTO] = None

class ScheduleResponse(BaseModel):
    count: int
    # one maximal selection as [entry, exit] pairs
    selected: List[List[int]] = Field(default_factory=list)

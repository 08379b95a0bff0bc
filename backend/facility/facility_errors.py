# every failure of the core is raised as one of these; the HTTP layer turns them
# into {ok: false, error: {...}} results for the frontend.


class FacilityError(Exception):
    """
    Base class for all facility-related errors.
    """
    code = "FACILITY_ERROR"


class AlreadyParkedError(FacilityError):
    """
    Raised when a vehicle already holds an active reservation.
    """
    code = "ALREADY_PARKED"


class NotParkedError(FacilityError):
    """
    Raised when releasing a vehicle that holds no reservation.
    """
    code = "NOT_PARKED"


class NoCapacityError(FacilityError):
    """
    Raised when no matching slot (or no free contiguous window) exists.
    """
    code = "NO_CAPACITY"


class InvalidTypeError(FacilityError):
    """
    Raised for an unrecognized size class or vehicle kind.
    """
    code = "INVALID_TYPE"


class OutOfRangeError(FacilityError):
    """
    Raised when a slot position is outside the facility.
    """
    code = "OUT_OF_RANGE"


class UnreachableError(FacilityError):
    """
    Raised when no path exists between two valid slots.
    """
    code = "UNREACHABLE"


class SlotNotFoundError(FacilityError):
    code = "SLOT_NOT_FOUND"


class SlotOccupiedError(FacilityError):
    code = "SLOT_OCCUPIED"


class SlotNotOccupiedError(FacilityError):
    code = "SLOT_NOT_OCCUPIED"


class DuplicateSlotError(FacilityError):
    code = "DUPLICATE_SLOT"

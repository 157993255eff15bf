"""Global enums: must match DB CHECK constraints exactly.

See alembic/versions/004_create_maker_events.py.
"""

from enum import Enum

from src.dex_common.errors import InvalidInputError


class Side(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class MakerEventType(str, Enum):
    """What happened to a resting order."""
    PLACE = "PLACE"    # entered the book
    FILL = "FILL"      # matched, partially or fully
    CANCEL = "CANCEL"  # removed by its owner
    EVICT = "EVICT"    # removed by an administrative or capacity rule


def parse_enum(enum_cls: type[Enum], value: object) -> Enum:
    """Return the member for `value`, rejecting anything outside the enum.

    Accepts a member of `enum_cls` or its exact string value. No case folding
    and no fallback member.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    allowed = ", ".join(m.value for m in enum_cls)
    raise InvalidInputError(f"{enum_cls.__name__} must be one of {allowed}, got {value!r}")

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Hashable, Optional, Tuple, Union

from ..exceptions import VerifierConfigurationError

if TYPE_CHECKING:
    from ..verifiers.base import BaseVerifier


class ItemType:
    """Kind tags for the verifier variants."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"

    @classmethod
    def get_all_types(cls) -> Tuple[str, ...]:
        return (cls.STRING, cls.NUMBER, cls.BOOLEAN, cls.ARRAY, cls.OBJECT)


@dataclass(frozen=True)
class RangeEnd:
    number: Union[int, float]
    included: bool = True


@dataclass(frozen=True)
class NumberRange:
    start: RangeEnd
    end: RangeEnd

    @classmethod
    def from_value(cls, value: Union["NumberRange", Mapping]) -> "NumberRange":
        """Accept either a NumberRange or a ``{"start": {...}, "end": {...}}`` mapping."""
        if isinstance(value, NumberRange):
            return value
        if not isinstance(value, Mapping):
            raise VerifierConfigurationError(
                f"Number range must be a NumberRange or a mapping, got {type(value).__name__}"
            )
        try:
            return cls(start=_range_end(value["start"]), end=_range_end(value["end"]))
        except KeyError as exc:
            raise VerifierConfigurationError(f"Number range is missing the {exc} field") from exc

    @property
    def is_valid(self) -> bool:
        return self.start.number < self.end.number

    def contains(self, value: Union[int, float]) -> bool:
        above = self.start.number <= value if self.start.included else self.start.number < value
        below = self.end.number >= value if self.end.included else self.end.number > value
        return above and below

    @property
    def start_tag(self) -> str:
        return "[" if self.start.included else "("

    @property
    def end_tag(self) -> str:
        return "]" if self.end.included else ")"


def _range_end(value: Any) -> RangeEnd:
    if isinstance(value, RangeEnd):
        return value
    if not isinstance(value, Mapping):
        raise VerifierConfigurationError(
            f"Range end must be a RangeEnd or a mapping, got {type(value).__name__}"
        )
    return RangeEnd(number=value["number"], included=bool(value.get("included", True)))


@dataclass(frozen=True)
class ArrayItem:
    verifier: "BaseVerifier"
    item_type: str
    # Validates repeat_count + 1 consecutive elements
    repeat_count: Optional[int] = None
    # Consumes every remaining element; only allowed on the last item
    repeated: bool = False


@dataclass(frozen=True)
class ObjectItem:
    verifier: "BaseVerifier"
    item_type: str
    key: Hashable
    required: bool = False

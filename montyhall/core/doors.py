"""Doors and door arrangements for the Monty Hall game."""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple
from numbers import Integral
from .errors import ContractViolationError, InvalidArgumentError


DOORS: Tuple[int, ...] = (1, 2, 3)


class DoorContent(Enum):
    """What is hidden behind a door."""
    GOAT = "goat"
    CAR = "car"

    def __str__(self):
        return self.value


def check_door(door: int) -> int:
    """Return `door` as a plain int, or raise if it is not a valid door index."""
    if isinstance(door, bool) or not isinstance(door, Integral) or door not in DOORS:
        raise ContractViolationError(f"Door must be one of {DOORS}, got {door!r}")
    return int(door)


@dataclass(frozen=True)
class Arrangement:
    """Contents of the three doors for one round, indexed from 1."""
    contents: Tuple[DoorContent, ...]

    def __post_init__(self):
        contents = tuple(self.contents)
        object.__setattr__(self, "contents", contents)

        if len(contents) != len(DOORS):
            raise ContractViolationError(
                f"An arrangement needs exactly {len(DOORS)} doors, got {len(contents)}"
            )
        if not all(isinstance(c, DoorContent) for c in contents):
            raise ContractViolationError(f"Invalid door contents: {contents!r}")

        if contents.count(DoorContent.CAR) != 1 or contents.count(DoorContent.GOAT) != 2:
            raise ContractViolationError(
                f"An arrangement needs one car and two goats, got {list(map(str, contents))}"
            )

    def __getitem__(self, door: int) -> DoorContent:
        return self.contents[check_door(door) - 1]

    def __iter__(self):
        return iter(self.contents)

    def __len__(self) -> int:
        return len(self.contents)

    @property
    def car_door(self) -> int:
        """Door index hiding the car."""
        return self.contents.index(DoorContent.CAR) + 1

    @property
    def goat_doors(self) -> List[int]:
        """Door indices hiding goats, in ascending order."""
        return [door for door in DOORS if self[door] == DoorContent.GOAT]

    @classmethod
    def with_car_behind(cls, door: int) -> "Arrangement":
        """Build the arrangement with the car behind `door`."""
        door = check_door(door)
        return cls(tuple(
            DoorContent.CAR if d == door else DoorContent.GOAT for d in DOORS
        ))

    @classmethod
    def from_labels(cls, labels: Iterable[str]) -> "Arrangement":
        """Parse labels such as ``["goat", "goat", "car"]`` (case-insensitive)."""
        contents = []
        for label in labels:
            try:
                contents.append(DoorContent(str(label).strip().lower()))
            except ValueError:
                raise InvalidArgumentError(f"Unknown door content: {label!r}") from None

        try:
            return cls(tuple(contents))
        except ContractViolationError as e:
            # Bad user text is an input error, not a broken invariant
            raise InvalidArgumentError(str(e)) from None

    def __str__(self) -> str:
        return " | ".join(f"{door}: {content}" for door, content in zip(DOORS, self.contents))

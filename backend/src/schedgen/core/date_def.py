"""
Date definitions and their evaluation order.

A DateDef names one output date series and describes how to derive it in
each period: an anchor picks the base date, then adjustment steps (selectors
and shifters) are applied left to right.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Sequence, Tuple, Union

from schedgen.core.anchors import Anchor, OtherDate, PeriodEnd, PeriodStart, reference_of
from schedgen.core.errors import (
    CyclicDependencyError,
    DuplicateNameError,
    EmptyScheduleError,
    ScheduleError,
    UnknownReferenceError,
)
from schedgen.core.selectors import Selector
from schedgen.core.shifters import Shifter

Adjustment = Union[Selector, Shifter]


@dataclass(frozen=True)
class DateDef:
    """
    Named rule producing one date per period.

    Attributes:
        name: Unique name within a schedule request (e.g. "CouponDate")
        anchor: Base date in the period
        adjustment: A selector, a shifter, a sequence of them applied in
            order, or None to keep the anchored date
    """

    name: str
    anchor: Anchor = field(default_factory=PeriodEnd)
    adjustment: Union[None, Adjustment, Sequence[Adjustment]] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ScheduleError(f"Date definition name must be a non-empty string, got {self.name!r}")
        if not isinstance(self.anchor, (PeriodStart, PeriodEnd, OtherDate)):
            raise ScheduleError(f"Unknown anchor for '{self.name}': {self.anchor!r}")
        if self.adjustment is None or isinstance(self.adjustment, (Selector, Shifter)):
            return
        if isinstance(self.adjustment, (str, bytes)) or not isinstance(self.adjustment, Iterable):
            raise ScheduleError(f"Unknown adjustment for '{self.name}': {self.adjustment!r}")
        steps = tuple(self.adjustment)
        for step in steps:
            if not isinstance(step, (Selector, Shifter)):
                raise ScheduleError(f"Unknown adjustment step for '{self.name}': {step!r}")
        object.__setattr__(self, "adjustment", steps)

    @property
    def steps(self) -> Tuple[Adjustment, ...]:
        """Adjustment steps in application order."""
        if self.adjustment is None:
            return ()
        if isinstance(self.adjustment, (Selector, Shifter)):
            return (self.adjustment,)
        return tuple(self.adjustment)

    @property
    def depends_on(self) -> Optional[str]:
        return reference_of(self.anchor)

    def apply(self, base: date) -> date:
        """Run the adjustment steps on an anchored date."""
        result = base
        for step in self.steps:
            if isinstance(step, Selector):
                result = step.select(result)
            elif isinstance(step, Shifter):
                result = step.shift(result)
            else:
                raise TypeError(f"Unknown adjustment for '{self.name}': {step!r}")
        return result


def resolve_order(date_defs: Sequence[DateDef]) -> List[DateDef]:
    """
    Order date definitions so each comes after the one it is anchored on.

    Definitions without dependencies keep their declaration order.

    Args:
        date_defs: Date definitions of one schedule request

    Returns:
        Date definitions in evaluation order

    Raises:
        EmptyScheduleError: If no definitions are given
        DuplicateNameError: If two definitions share a name
        UnknownReferenceError: If an anchor names a missing definition
        CyclicDependencyError: If anchors form a cycle
    """
    if not date_defs:
        raise EmptyScheduleError()

    duplicates = [name for name, count in Counter(d.name for d in date_defs).items() if count > 1]
    if duplicates:
        raise DuplicateNameError(duplicates)

    by_name = {d.name: d for d in date_defs}
    for d in date_defs:
        ref = d.depends_on
        if ref is not None and ref not in by_name:
            raise UnknownReferenceError(d.name, ref)

    # Each definition has at most one dependency, so walking the chain is enough
    order: List[DateDef] = []
    done = set()
    for d in date_defs:
        chain: List[str] = []
        current: Optional[str] = d.name
        while current is not None and current not in done:
            if current in chain:
                raise CyclicDependencyError(chain[chain.index(current):] + [current])
            chain.append(current)
            current = by_name[current].depends_on
        for name in reversed(chain):
            order.append(by_name[name])
            done.add(name)

    return order

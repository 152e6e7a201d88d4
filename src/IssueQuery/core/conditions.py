from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Sequence, Union


class ComparisonOp(Enum):
    """Closed set of comparison operators.

    Declaration order is the vocabulary order used by the lexer and by the
    suggestion helper.
    """

    EQ = "="
    NE = "!="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="
    CONTAINS = "~"
    NOT_CONTAINS = "!~"
    IN = "IN"
    NOT_IN = "NOT IN"
    IS = "IS"
    IS_NOT = "IS NOT"

    @classmethod
    def from_symbol(cls, symbol: str) -> ComparisonOp | None:
        """Return the operator for a symbol or keyword, or None when unknown."""
        normalized = " ".join(symbol.split()).upper()
        for op in cls:
            if op.value == normalized:
                return op
        return None

    @property
    def takes_list(self) -> bool:
        return self in (ComparisonOp.IN, ComparisonOp.NOT_IN)

    @property
    def is_null_test(self) -> bool:
        return self in (ComparisonOp.IS, ComparisonOp.IS_NOT)

    @property
    def is_substring(self) -> bool:
        return self in (ComparisonOp.CONTAINS, ComparisonOp.NOT_CONTAINS)


class Combinator(Enum):
    AND = "AND"
    OR = "OR"


LiteralValue = Union[str, int, datetime, None]


@dataclass(frozen=True, slots=True)
class ConditionLeaf:
    """One compiled comparison.

    Attributes:
        field: Storage attribute name, already mapped from the user-facing name.
        operator: Comparison operator.
        value: Coerced literal, or a tuple of literals for set membership.
            ``None`` means "null" for ``IS``/``IS NOT``.
        case_insensitive: Whether a substring match ignores case.
    """

    field: str
    operator: ComparisonOp
    value: LiteralValue | tuple[LiteralValue, ...]
    case_insensitive: bool = False


@dataclass(frozen=True, slots=True)
class ConditionGroup:
    """AND/OR collection of conditions.

    An empty AND group is the unconstrained result: it matches every record.
    """

    combinator: Combinator
    conditions: Sequence[ConditionLeaf | ConditionGroup] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "conditions", tuple(self.conditions))

    @property
    def is_empty(self) -> bool:
        return not self.conditions


ConditionTree = Union[ConditionLeaf, ConditionGroup]


def match_all() -> ConditionGroup:
    """Return the tree that places no constraint on records."""
    return ConditionGroup(combinator=Combinator.AND)

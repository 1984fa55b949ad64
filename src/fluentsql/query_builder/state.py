"""In-progress statement state owned by a query builder."""

from dataclasses import dataclass, field
from typing import List, Optional

from fluentsql.constants.sql import QueryType


@dataclass
class QueryState:
    """Accumulates the clauses of one statement.

    A builder replaces its state with a fresh instance every time a
    statement-initiating step runs. ``kind`` and ``base`` are set by that
    step and never change afterwards; ``conditions`` only grows and keeps
    insertion order; ``pagination`` holds at most one clause.
    """

    kind: Optional[QueryType] = None
    base: str = ""
    conditions: List[str] = field(default_factory=list)
    pagination: Optional[str] = None

    @property
    def is_initialized(self) -> bool:
        return self.kind is not None

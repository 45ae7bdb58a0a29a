"""Query parameter reduction applied to signed requests.

Historically a signed request carried only the ``sensor`` flag, every other
parameter being dropped. That behaviour is kept as :meth:`legacy` for
consumers that depend on byte-identical signed URLs; :meth:`pass_through`
keeps every parameter except the API ``key`` (the signing secret must never
travel in the query string).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence, Tuple

QueryParams = Sequence[Tuple[str, str]]


@dataclass(frozen=True)
class SignedQueryPolicy:
    """Which parameters survive when a request is signed.

    Attributes:
        keep: Names to keep; ``None`` keeps every name not in ``drop``.
        drop: Names always removed.
    """

    keep: Optional[FrozenSet[str]] = None
    drop: FrozenSet[str] = frozenset({"key"})

    def apply(self, params: QueryParams) -> List[Tuple[str, str]]:
        """Return ``params`` filtered by the policy, order preserved."""
        return [
            (name, value)
            for name, value in params
            if name not in self.drop and (self.keep is None or name in self.keep)
        ]

    @classmethod
    def legacy(cls) -> "SignedQueryPolicy":
        return cls(keep=frozenset({"sensor"}))

    @classmethod
    def pass_through(cls) -> "SignedQueryPolicy":
        return cls()


__all__ = ["SignedQueryPolicy", "QueryParams"]

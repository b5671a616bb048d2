"""
Query Filter

Field-to-value conditions constraining get/list/update/delete calls on a Storer.
"""

from typing import Any, Iterator, Mapping, Optional


class Filter:
    """
    Immutable set of equality conditions

    A filter has two parts:
    - conditions: free field/value pairs (identifiers, query-string filters)
    - scope: mandatory parent keys (e.g. org_uuid for resources nested under an organization)

    Scope keys always win: a condition on a scoped field is dropped, so client
    input cannot widen a scoped query.
    """

    __slots__ = ("_conditions", "_scope")

    def __init__(
        self,
        conditions: Optional[Mapping[str, Any]] = None,
        *,
        scope: Optional[Mapping[str, Any]] = None,
    ):
        self._scope = dict(scope or {})
        self._conditions = {
            key: value
            for key, value in (conditions or {}).items()
            if key not in self._scope
        }

    @property
    def conditions(self) -> dict[str, Any]:
        return dict(self._conditions)

    @property
    def scope(self) -> dict[str, Any]:
        return dict(self._scope)

    def where(self, **conditions: Any) -> "Filter":
        """Return a new filter with extra conditions, keeping the scope"""
        return Filter({**self._conditions, **conditions}, scope=self._scope)

    def scoped(self, **scope: Any) -> "Filter":
        """Return a new filter with extra scope keys"""
        return Filter(self._conditions, scope={**self._scope, **scope})

    def as_dict(self) -> dict[str, Any]:
        return {**self._conditions, **self._scope}

    def items(self) -> Iterator[tuple[str, Any]]:
        return iter(self.as_dict().items())

    def __contains__(self, key: str) -> bool:
        return key in self._conditions or key in self._scope

    def __getitem__(self, key: str) -> Any:
        return self.as_dict()[key]

    def __len__(self) -> int:
        return len(self._conditions) + len(self._scope)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Filter):
            return NotImplemented
        return self._conditions == other._conditions and self._scope == other._scope

    def __repr__(self) -> str:
        return f"Filter(conditions={self._conditions!r}, scope={self._scope!r})"

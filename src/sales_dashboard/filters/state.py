"""Filter state machine.

`reduce_filters` is a pure reducer over `FilterCriteria`: the same
(state, action) pair always yields the same next state. `FilterStore` is the
small mutable holder each view owns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from sales_dashboard.models import FilterCriteria

log = logging.getLogger(__name__)


class FilterField(str, Enum):
    START_DATE = "start_date"
    END_DATE = "end_date"
    CHOSEN_YEAR = "chosen_year"
    SELECTED_CATEGORY = "selected_category"
    REGION = "region"


# One set-field kind per FilterField, plus RESET
ActionKind = Enum(  # type: ignore[misc]
    "ActionKind",
    {**{f.name: f.value for f in FilterField}, "RESET": "reset"},
    type=str,
)


ALL_FIELDS: frozenset[FilterField] = frozenset(FilterField)


@dataclass(frozen=True)
class FilterAction:
    """A discrete filter event.

    Attributes:
        kind: Action kind; plain strings are accepted and matched by value.
        value: New field value (ignored by `RESET`).
    """
    kind: ActionKind | str
    value: str = ""


def set_field(field: FilterField | str, value: str) -> FilterAction:
    """Return the action replacing `field` with `value`."""
    return FilterAction(kind=ActionKind(FilterField(field).value), value=value)


def reset_all() -> FilterAction:
    """Return the action clearing every field."""
    return FilterAction(kind=ActionKind.RESET)


def reduce_filters(
    state: FilterCriteria,
    action: FilterAction,
    active_fields: frozenset[FilterField] = ALL_FIELDS,
) -> FilterCriteria:
    """Apply `action` to `state` and return the next state.

    Set-field actions for fields outside `active_fields` and unrecognised
    kinds leave the state unchanged. No value validation is performed.

    Args:
        state: Current criteria.
        action: Action to apply.
        active_fields: Fields the owning view responds to.

    Returns:
        The next `FilterCriteria` (possibly `state` itself).
    """
    kind = action.kind.value if isinstance(action.kind, Enum) else str(action.kind)

    if kind == ActionKind.RESET.value:
        return FilterCriteria()

    try:
        field = FilterField(kind)
    except ValueError:
        return state

    if field not in active_fields:
        return state

    return state.model_copy(update={field.value: action.value})


class FilterStore:
    """Mutable filter state owned by a single view."""

    def __init__(self, active_fields: frozenset[FilterField] = ALL_FIELDS) -> None:
        self.active_fields = active_fields
        self._criteria = FilterCriteria()

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    def dispatch(self, action: FilterAction) -> FilterCriteria:
        self._criteria = reduce_filters(self._criteria, action, self.active_fields)
        log.debug("Filter state after %s: %s", action.kind, self._criteria)
        return self._criteria

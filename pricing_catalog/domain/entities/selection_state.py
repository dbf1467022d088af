from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


WIDGET_STATE_KEY = "selectedCardId"


@dataclass(frozen=True)
class SelectionState:
    selected_card_id: int | None = None

    @classmethod
    def from_widget_state(cls, state: Mapping[str, Any] | None) -> SelectionState:
        if not state:
            return cls()
        raw = state.get(WIDGET_STATE_KEY)
        if raw is None or isinstance(raw, bool):
            return cls()
        try:
            return cls(selected_card_id=int(raw))
        except (TypeError, ValueError):
            return cls()

    def to_widget_state(self) -> dict[str, Any]:
        return {WIDGET_STATE_KEY: self.selected_card_id}

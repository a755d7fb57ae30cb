"""Immutable per-frame input snapshot contracts."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field

from chordbind.api.atoms import InputAtom


@dataclass(frozen=True, slots=True)
class ActionSnapshot:
    """Resolved logical action state for one frame."""

    active: frozenset[Hashable] = field(default_factory=frozenset)
    just_started: frozenset[Hashable] = field(default_factory=frozenset)
    just_ended: frozenset[Hashable] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class ChordSnapshot:
    """Atoms considered active during one frame, plus derived action state."""

    frame_index: int
    active_inputs: frozenset[InputAtom] = field(default_factory=frozenset)
    just_pressed: frozenset[InputAtom] = field(default_factory=frozenset)
    just_released: frozenset[InputAtom] = field(default_factory=frozenset)
    actions: ActionSnapshot = field(default_factory=ActionSnapshot)

    def is_active(self, member: InputAtom) -> bool:
        return member in self.active_inputs


def create_empty_chord_snapshot(*, frame_index: int = 0) -> ChordSnapshot:
    """Create an empty snapshot for bootstrap and tests."""
    return ChordSnapshot(frame_index=frame_index)


__all__ = ["ActionSnapshot", "ChordSnapshot", "create_empty_chord_snapshot"]

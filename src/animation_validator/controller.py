"""Animator controller graph and host selection model.

Mirrors the part of the host scene the validator needs: the selected object,
its animator, the animator's controller, and the clips reachable from the
controller's layers. Nothing here is persisted; it is rebuilt per run.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from animation_validator.clips.storage import SerializedClip
from animation_validator.hierarchy.nodes import HierarchyNode

__all__ = [
    "Animator",
    "AnimatorController",
    "AnimatorLayer",
    "AnimatorState",
    "SceneObject",
    "Selection",
    "StateMachine",
]


@dataclass
class AnimatorState:
    """A state in a state machine; ``motion`` is None or a non-clip motion when empty."""

    name: str
    motion: object | None = None

    @property
    def clip(self) -> SerializedClip | None:
        return self.motion if isinstance(self.motion, SerializedClip) else None


@dataclass
class StateMachine:
    states: list[AnimatorState] = field(default_factory=list)


@dataclass
class AnimatorLayer:
    name: str
    state_machine: StateMachine = field(default_factory=StateMachine)


@dataclass
class AnimatorController:
    """A collection of layers, each owning a state machine."""

    layers: list[AnimatorLayer] = field(default_factory=list)

    def iter_clips(self) -> Iterator[SerializedClip]:
        """Yield every clip referenced by a state, in layer then state order.

        States without a clip are skipped. A clip referenced by several states
        is yielded once per reference.
        """
        for layer in self.layers:
            for state in layer.state_machine.states:
                clip = state.clip
                if clip is None:
                    continue
                yield clip


@dataclass
class Animator:
    controller: AnimatorController | None = None


@dataclass
class SceneObject:
    """A selectable object: its hierarchy node plus an optional animator."""

    node: HierarchyNode
    animator: Animator | None = None

    @property
    def name(self) -> str:
        return self.node.name


@dataclass
class Selection:
    """The host's current selection."""

    active_object: SceneObject | None = None

"""SceneLoader: builds a host Selection from a JSON scene document.

Scene document shape::

    {
        "root": {"name": "Root", "children": [...]},
        "animator": {
            "controller": {
                "layers": [
                    {"name": "Base Layer",
                     "states": [{"name": "Wave", "motion": "clips/Wave.json"}]}
                ]
            }
        }
    }

``animator`` and ``controller`` may be omitted or null; the validator then
reports the missing piece and yields no result. A state's ``motion`` is a
clip file reference resolved relative to the scene file, or null.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from animation_validator.clips.assets import JsonAssetDatabase, read_json
from animation_validator.controller import (
    Animator,
    AnimatorController,
    AnimatorLayer,
    AnimatorState,
    SceneObject,
    Selection,
    StateMachine,
)
from animation_validator.errors import SceneFormatError
from animation_validator.hierarchy.builder import HierarchyBuilder

__all__ = ["LoadedScene", "SceneLoader"]


@dataclass
class LoadedScene:
    """A loaded scene: the selection to validate and the database its clips live in."""

    selection: Selection
    assets: JsonAssetDatabase = field(repr=False)


class SceneLoader:
    """Loads scene documents and the clip files they reference."""

    def __init__(self, builder: HierarchyBuilder | None = None) -> None:
        self._builder = builder if builder is not None else HierarchyBuilder()

    def load(self, scene_path: Path | str) -> LoadedScene:
        """Read ``scene_path`` and build the selection it describes.

        Raises:
            OSError:           If the scene or a referenced clip cannot be read.
            SceneFormatError:  If the scene or a clip document is malformed.
        """
        scene_path = Path(scene_path)
        document = read_json(scene_path)

        assets = JsonAssetDatabase(scene_path.parent)
        selection = self.build(document, assets)
        return LoadedScene(selection=selection, assets=assets)

    def build(self, document: Any, assets: JsonAssetDatabase) -> Selection:
        """Build a Selection from an already-parsed scene document."""
        if not isinstance(document, Mapping):
            raise SceneFormatError("scene document must be a JSON object")
        if "root" not in document:
            raise SceneFormatError("scene document has no 'root' object")

        node = self._builder.build(document["root"])
        animator = self._build_animator(document.get("animator"), assets)
        return Selection(active_object=SceneObject(node=node, animator=animator))

    def _build_animator(
        self, raw: Any, assets: JsonAssetDatabase
    ) -> Animator | None:
        if raw is None:
            return None
        if not isinstance(raw, Mapping):
            raise SceneFormatError("animator must be an object")

        raw_controller = raw.get("controller")
        if raw_controller is None:
            return Animator(controller=None)
        if not isinstance(raw_controller, Mapping):
            raise SceneFormatError("animator.controller must be an object")

        raw_layers = _require_list(
            raw_controller.get("layers", []), "animator.controller.layers"
        )
        layers: list[AnimatorLayer] = []
        for l_idx, raw_layer in enumerate(raw_layers):
            where = f"animator.controller.layers[{l_idx}]"
            if not isinstance(raw_layer, Mapping):
                raise SceneFormatError(f"{where} must be an object")
            raw_states = _require_list(raw_layer.get("states", []), f"{where}.states")
            states = [
                self._build_state(raw_state, f"{where}.states[{s_idx}]", assets)
                for s_idx, raw_state in enumerate(raw_states)
            ]
            layers.append(
                AnimatorLayer(
                    name=str(raw_layer.get("name", f"Layer {l_idx}")),
                    state_machine=StateMachine(states=states),
                )
            )

        return Animator(controller=AnimatorController(layers=layers))

    @staticmethod
    def _build_state(
        raw: Any, where: str, assets: JsonAssetDatabase
    ) -> AnimatorState:
        if not isinstance(raw, Mapping):
            raise SceneFormatError(f"{where} must be an object")
        motion = raw.get("motion")
        if motion is not None and not isinstance(motion, str):
            raise SceneFormatError(
                f"{where}.motion must be a clip file reference or null"
            )
        clip = assets.load_clip(motion) if motion else None
        return AnimatorState(name=str(raw.get("name", "")), motion=clip)


def _require_list(value: Any, where: str) -> list[Any]:
    if not isinstance(value, list):
        raise SceneFormatError(f"{where} must be a list, got {type(value).__name__}")
    return value

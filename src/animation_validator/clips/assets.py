"""Asset databases: where serialized clips come from and how they are saved.

Both classes satisfy the ``AssetDatabase`` Protocol structurally via
``save_assets()``, the single persistence flush issued after a batch
recovery. Only clips with committed, unsaved changes are written.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from animation_validator.clips.storage import SerializedClip
from animation_validator.errors import SceneFormatError

__all__ = ["JsonAssetDatabase", "MemoryAssetDatabase", "read_json"]

logger = logging.getLogger(__name__)


def read_json(path: Path) -> Any:
    """Parse a UTF-8 JSON file.

    Raises:
        OSError:          If the file cannot be read.
        SceneFormatError: If the file is not UTF-8 or not valid JSON.
    """
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise SceneFormatError(f"{path}: not UTF-8 encoded ({exc.reason})") from exc
    except json.JSONDecodeError as exc:
        raise SceneFormatError(
            f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})"
        ) from exc


class MemoryAssetDatabase:
    """In-memory asset database for embedding hosts and tests.

    ``save_assets()`` clears the dirty flag of every registered clip and
    counts the flush; nothing leaves the process.
    """

    def __init__(self, clips: list[SerializedClip] | None = None) -> None:
        self._clips: list[SerializedClip] = list(clips or [])
        self.save_count = 0

    def add(self, clip: SerializedClip) -> SerializedClip:
        if clip not in self._clips:
            self._clips.append(clip)
        return clip

    @property
    def clips(self) -> list[SerializedClip]:
        return list(self._clips)

    def save_assets(self) -> list[SerializedClip]:
        """Mark every dirty clip as saved.

        Returns:
            The clips that were dirty before the flush.
        """
        saved = [clip for clip in self._clips if clip.dirty]
        for clip in saved:
            clip.mark_saved()
        self.save_count += 1
        return saved


class JsonAssetDatabase:
    """Loads clip documents from JSON files and writes dirty ones back.

    Each file is loaded at most once: duplicate references to the same clip
    (the same clip used by several states) share one ``SerializedClip`` so a
    fix applied through any of them is saved exactly once.

    Args:
        base_dir: Directory that relative clip references are resolved
            against (normally the scene file's directory).
        indent:   JSON indentation used when writing files back. Defaults to 2.
    """

    def __init__(self, base_dir: Path | str = ".", indent: int = 2) -> None:
        self._base_dir = Path(base_dir)
        self._indent = indent
        self._loaded: dict[Path, SerializedClip] = {}

    def load_clip(self, reference: str | Path) -> SerializedClip:
        """Return the SerializedClip for ``reference``, loading it on first use.

        Args:
            reference: Path to a ``.json`` clip document, absolute or relative
                to ``base_dir``.

        Raises:
            OSError:          If the file cannot be read (missing, a directory,
                no permission).
            SceneFormatError: If the file is not UTF-8 JSON or not a clip
                document.
        """
        path = (self._base_dir / reference).resolve()
        cached = self._loaded.get(path)
        if cached is not None:
            return cached

        document = read_json(path)
        if not isinstance(document, dict):
            raise SceneFormatError(f"{path}: clip document must be a JSON object")

        clip = SerializedClip(document, source=path)
        self._loaded[path] = clip
        logger.debug("Loaded clip %r from %s", clip.name, path)
        return clip

    @property
    def clips(self) -> list[SerializedClip]:
        return list(self._loaded.values())

    def save_assets(self) -> list[Path]:
        """Write every dirty clip back to its source file.

        Staged but uncommitted writes are not saved.

        Returns:
            The files that were written.
        """
        written: list[Path] = []
        for path, clip in self._loaded.items():
            if not clip.dirty:
                continue
            text = json.dumps(clip.document, indent=self._indent, ensure_ascii=False)
            path.write_text(text + "\n", encoding="utf-8")
            clip.mark_saved()
            written.append(path)
            logger.info("Saved clip %r to %s", clip.name, path)
        return written

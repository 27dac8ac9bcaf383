import json
import logging
import os
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional

logger = logging.getLogger(__name__)

STORAGE_KEY = "notes_v1"
TITLE_MAX_LENGTH = 60
BODY_MAX_LENGTH = 10_240


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def parse_timestamp(ts: str) -> Optional[datetime]:
    try:
        parsed = datetime.fromisoformat(ts)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def new_note_id(existing: Iterable[str] = ()) -> str:
    taken = set(existing)
    while True:
        note_id = str(uuid.uuid4())
        if note_id not in taken:
            return note_id


def _atomic_write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with tmp_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
        f.flush()
        os.fsync(f.fileno())
    tmp_path.replace(path)


def _require_str(raw: dict[str, Any], field: str) -> str:
    value = raw[field]
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string")
    return value


@dataclass(frozen=True)
class Note:
    id: str
    title: str
    body: str
    created: str
    updated: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "body": self.body,
            "created": self.created,
            "updated": self.updated,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Note":
        if not isinstance(raw, dict):
            raise TypeError("note record must be an object")
        note_id = _require_str(raw, "id")
        if not note_id:
            raise ValueError("note id must not be empty")
        return cls(
            id=note_id,
            title=_require_str(raw, "title"),
            body=_require_str(raw, "body"),
            created=_require_str(raw, "created"),
            updated=_require_str(raw, "updated"),
        )


class NotesStorage:
    """Flat persisted collection: one JSON array under one fixed key.

    Reads and writes are best-effort. A missing or broken file loads as an
    empty collection and a failed write is logged and skipped, so callers
    never see storage errors.
    """

    def __init__(self, base_dir: Path, key: str = STORAGE_KEY):
        if not key or any(ch in key for ch in "/\\") or ".." in key:
            raise ValueError("Invalid storage key")
        self.base_dir = base_dir
        self.key = key

    @property
    def path(self) -> Path:
        return self.base_dir / f"{self.key}.json"

    def load(self) -> list[Note]:
        path = self.path
        try:
            if not path.exists():
                return []
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Could not read saved notes from %s: %s", path, exc)
            return []
        if not isinstance(raw, list):
            logger.warning("Saved notes in %s are not a list; ignoring them", path)
            return []

        out: list[Note] = []
        seen: set[str] = set()
        for item in raw:
            try:
                note = Note.from_dict(item)
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("Skipping malformed note record in %s: %s", path, exc)
                continue
            if note.id in seen:
                logger.warning("Skipping duplicate note id %s in %s", note.id, path)
                continue
            seen.add(note.id)
            out.append(note)
        return out

    def save(self, notes: Iterable[Note]) -> bool:
        try:
            _atomic_write_json(self.path, [n.to_dict() for n in notes])
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not persist notes to %s: %s", self.path, exc)
            return False
        return True

# utils/storage.py

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Protocol

from schemas.plan import ExportEnvelope, GeneratedPlan
from schemas.profile import FinancialProfile
from utils.logger import get_logger

logger = get_logger(__name__)

STORAGE_KEYS: Dict[str, str] = {
    "FORM_DATA": "slainte_form_data",
    "GENERATED_PLAN": "slainte_generated_plan",
    "SETTINGS": "slainte_settings",
}

# Typical browser localStorage quota
STORAGE_QUOTA_BYTES = 5 * 1024 * 1024


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class InMemoryStore:
    """Process-local store, used in tests and for throwaway sessions."""

    def __init__(self):
        self._items: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def delete(self, key: str) -> None:
        self._items.pop(key, None)


class DirectoryStore:
    """One UTF-8 JSON file per key inside a local directory."""

    def __init__(self, directory: str):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self._path(key).write_text(value, encoding="utf-8")

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


@dataclass(frozen=True)
class StorageUsage:
    used: int
    available: int


def export_envelope(
    form_data: Optional[FinancialProfile],
    plan: Optional[GeneratedPlan],
    exported_at: Optional[datetime] = None,
) -> ExportEnvelope:
    exported_at = exported_at or datetime.now(timezone.utc)
    return ExportEnvelope(form_data=form_data, plan=plan, exported_at=exported_at.isoformat())


def dump_envelope(envelope: ExportEnvelope) -> str:
    return json.dumps(envelope.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False)


def parse_envelope(text: str) -> ExportEnvelope:
    """Parses an exported bundle. Raises ValueError (incl. ValidationError) when malformed."""
    return ExportEnvelope.model_validate_json(text)


class PlanStorage:
    """
    Saves the questionnaire and the generated plan in a key-value store.

    Storage problems never reach the caller: failures are logged, saves are
    skipped and loads return None.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    def _save(self, key: str, payload: str, what: str) -> None:
        try:
            self.store.set(key, payload)
        except OSError:
            logger.exception("Failed to save %s", what)

    def _load(self, key: str, model, what: str):
        try:
            raw = self.store.get(key)
            return model.model_validate_json(raw) if raw else None
        except (OSError, ValueError):
            logger.exception("Failed to load %s", what)
            return None

    # --- Form data ---
    def save_form_data(self, profile: FinancialProfile) -> None:
        self._save(STORAGE_KEYS["FORM_DATA"], profile.model_dump_json(by_alias=True), "form data")

    def load_form_data(self) -> Optional[FinancialProfile]:
        return self._load(STORAGE_KEYS["FORM_DATA"], FinancialProfile, "form data")

    # --- Generated plan ---
    def save_plan(self, plan: GeneratedPlan) -> None:
        self._save(STORAGE_KEYS["GENERATED_PLAN"], plan.model_dump_json(by_alias=True), "plan")

    def load_plan(self) -> Optional[GeneratedPlan]:
        return self._load(STORAGE_KEYS["GENERATED_PLAN"], GeneratedPlan, "plan")

    def clear_all(self) -> None:
        for key in STORAGE_KEYS.values():
            try:
                self.store.delete(key)
            except OSError:
                logger.exception("Failed to clear %s", key)

    def export_data(self, exported_at: Optional[datetime] = None) -> str:
        """All stored data as an indented JSON bundle for the user to download."""
        envelope = export_envelope(self.load_form_data(), self.load_plan(), exported_at)
        return dump_envelope(envelope)

    def import_data(self, text: str) -> bool:
        try:
            envelope = parse_envelope(text)
        except ValueError:
            logger.exception("Failed to import data")
            return False
        if envelope.form_data is not None:
            self.save_form_data(envelope.form_data)
        if envelope.plan is not None:
            self.save_plan(envelope.plan)
        return True

    def get_storage_usage(self) -> StorageUsage:
        used = 0
        for key in STORAGE_KEYS.values():
            try:
                item = self.store.get(key)
            except OSError:
                logger.exception("Failed to read %s", key)
                continue
            if item:
                # Rough estimate, UTF-16 as in browser storage
                used += len(item) * 2
        return StorageUsage(used=used, available=STORAGE_QUOTA_BYTES)

"""Shared loading for the condition, body and regen profile repositories.

Each repository owns one JSON file keyed by definition id. The file is read
lazily on first access and parsed once; `_build` turns the raw mapping into
frozen defs and the `_require_*` helpers report bad fields with the id path
of the definition being parsed.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Generic, List, TypeVar

from regen.data import paths
from regen.data.errors import DataValidationError
from regen.data.json_loader import load_json

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Lazily loaded, id-keyed store of frozen definitions."""

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    def _get_file_path(self) -> Path:
        return paths.get_definitions_path(self._base_path) / self._filename

    def _load_raw(self) -> dict[str, object]:
        file_path = self._get_file_path()
        raw = load_json(file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(
                f"{file_path.name} must map definition ids to objects, got {type(raw).__name__}."
            )
        return raw

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        """Parse the id-keyed payload into definitions. Subclasses must override."""
        raise NotImplementedError

    def _ensure_loaded(self) -> None:
        if self._definitions is None:
            self._definitions = self._build(self._load_raw())

    def get(self, def_id: str) -> T:
        """Look up a definition; unknown ids raise ``KeyError`` with the id."""
        self._ensure_loaded()
        assert self._definitions is not None
        try:
            return self._definitions[def_id]
        except KeyError as exc:
            raise KeyError(def_id) from exc

    def all(self) -> list[T]:
        """Every definition in the file, ordered by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        return [self._definitions[key] for key in sorted(self._definitions.keys())]

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be a JSON object.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataValidationError(f"{context} must be an integer.")
        return value

    @staticmethod
    def _require_number(value: object, context: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataValidationError(f"{context} must be a number.")
        return float(value)

    @staticmethod
    def _require_bool(value: object, context: str) -> bool:
        if not isinstance(value, bool):
            raise DataValidationError(f"{context} must be a boolean.")
        return value

    @staticmethod
    def _require_str_list(value: object, context: str) -> List[str]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        result: List[str] = []
        for item in value:
            if not isinstance(item, str):
                raise DataValidationError(f"{context} entries must be strings.")
            result.append(item)
        return result

    @staticmethod
    def _assert_known_fields(
        payload: dict[str, object],
        required: set[str],
        optional: set[str],
        context: str,
    ) -> None:
        actual_keys = set(payload.keys())
        missing = required - actual_keys
        unknown = actual_keys - required - optional
        pieces = []
        if missing:
            pieces.append(f"missing fields: {sorted(missing)}")
        if unknown:
            pieces.append(f"unknown fields: {sorted(unknown)}")
        if pieces:
            raise DataValidationError(f"{context} has schema issues ({'; '.join(pieces)}).")

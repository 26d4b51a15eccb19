from __future__ import annotations

import json
from pathlib import Path

from domain.models import StoreConfig

_BACKENDS = {"memory", "sqlite"}
_ID_STRATEGIES = {"sequential", "uuid"}
_KNOWN_KEYS = {"backend", "db_path", "allow_overwrite", "id_strategy"}


class FileSystemConfigProvider:
    """Reads config.json from a config directory.

    Every public method re-reads from disk so that edits
    to the JSON file take effect without restarting the app.
    Keys left out of the file fall back to ``StoreConfig`` defaults.
    """

    def __init__(self, config_dir: str) -> None:
        self._config_dir = Path(config_dir)

    @property
    def config_path(self) -> Path:
        return self._config_dir / "config.json"

    def validate(self) -> list[str]:
        errors: list[str] = []
        data = self._validate_json_file(self.config_path, errors)
        if data is not None:
            errors.extend(self._validate_formats(data))
        return errors

    @staticmethod
    def _validate_formats(data: dict) -> list[str]:
        errors: list[str] = []
        unknown = set(data.keys()) - _KNOWN_KEYS
        if unknown:
            errors.append(f"config.json has unknown keys: {', '.join(sorted(unknown))}")

        backend = data.get("backend", StoreConfig.backend)
        if not isinstance(backend, str) or backend not in _BACKENDS:
            errors.append(
                f"backend must be one of {', '.join(sorted(_BACKENDS))}, got {backend!r}."
            )

        db_path = data.get("db_path", StoreConfig.db_path)
        if backend == "sqlite" and (not isinstance(db_path, str) or not db_path.strip()):
            errors.append("db_path must be a non-empty string when backend is 'sqlite'.")

        allow_overwrite = data.get("allow_overwrite")
        if allow_overwrite is not None and not isinstance(allow_overwrite, bool):
            errors.append("allow_overwrite must be a boolean (true/false), not a string.")

        id_strategy = data.get("id_strategy", StoreConfig.id_strategy)
        if not isinstance(id_strategy, str) or id_strategy not in _ID_STRATEGIES:
            errors.append(
                f"id_strategy must be one of {', '.join(sorted(_ID_STRATEGIES))}, "
                f"got {id_strategy!r}."
            )
        return errors

    def get_config(self) -> StoreConfig:
        data = self._read_json()
        return StoreConfig(
            backend=data.get("backend", StoreConfig.backend),
            db_path=data.get("db_path", StoreConfig.db_path),
            allow_overwrite=bool(data.get("allow_overwrite", StoreConfig.allow_overwrite)),
            id_strategy=data.get("id_strategy", StoreConfig.id_strategy),
        )

    # -- internal helpers ---------------------------------------------------

    def _read_json(self) -> dict:
        return json.loads(self.config_path.read_text(encoding="utf-8"))

    @staticmethod
    def _validate_json_file(path: Path, errors: list[str]) -> dict | None:
        """Validate a JSON file exists and holds an object.

        Returns the parsed dict on success, or None if the file
        is missing or unparseable.
        """
        if not path.is_file():
            errors.append(f"Missing file: {path}")
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            errors.append(f"Cannot read {path}: {exc}")
            return None
        if not isinstance(data, dict):
            errors.append(f"{path.name} must contain a JSON object")
            return None
        return data

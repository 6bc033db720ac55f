"""JSON-file-backed implementation of InvoiceRequestRepository.

Each stored request lives in its own file, ``<directory>/<name>.json``.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from tienda.domain.exceptions import ValidationError
from tienda.domain.repository.invoice_request_repository import (
    InvoiceRequestRepository,
)

_SAFE_NAME = re.compile(r"^[A-Za-z0-9_-]+$")
_SUFFIX = ".json"


class JsonInvoiceRequestRepository(InvoiceRequestRepository):

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    # --- InvoiceRequestRepository interface -----------------------------------

    def get_by_name(self, name: str) -> Any | None:
        path = self._path_for(name)
        if not path.is_file():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"Invoice request '{name}' is not valid JSON: {exc.msg}"
            ) from exc

    def list_names(self) -> list[str]:
        if not self._directory.is_dir():
            return []
        return sorted(
            path.stem
            for path in self._directory.glob(f"*{_SUFFIX}")
            if _SAFE_NAME.match(path.stem)
        )

    # --- Internal helpers -----------------------------------------------------

    def _path_for(self, name: str) -> Path:
        stem = name[: -len(_SUFFIX)] if name.endswith(_SUFFIX) else name
        # keeps lookups inside the directory ("../x" and friends never match)
        if not _SAFE_NAME.match(stem):
            raise ValidationError(f"Invalid invoice request name: '{name}'")
        return self._directory / f"{stem}{_SUFFIX}"

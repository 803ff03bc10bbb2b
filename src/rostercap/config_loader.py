"""Persist and load CLI column-mapping profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict


@dataclass
class MappingProfile:
    salary_mapping: Dict[str, str] = field(default_factory=dict)
    owner_mapping: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "MappingProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Mapping profile {path} must contain a JSON object")
        return cls(
            salary_mapping=data.get("salary_mapping", {}),
            owner_mapping=data.get("owner_mapping", {}),
        )

    def save(self, path: Path) -> None:
        payload = {
            "salary_mapping": self.salary_mapping,
            "owner_mapping": self.owner_mapping,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

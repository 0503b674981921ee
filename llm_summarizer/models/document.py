from pathlib import Path
from typing import Any

from pydantic import BaseModel


class InputDocument(BaseModel):
    path: Path
    raw: bytes
    parsed: Any

    @property
    def name(self) -> str:
        return self.path.stem

"""Properties shared by every kind of dashboard panel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Panel:
    """A dashboard panel as it appears in a dashboard model.

    ``settings`` holds the part of the model specific to the panel type.
    """

    title: str
    type: str
    span: float = 12.0
    height: str | None = None
    description: str | None = None
    transparent: bool = False
    is_new: bool = True
    datasource: str | None = None
    repeat: str | None = None
    targets: list[Any] = field(default_factory=list)
    settings: Any = None
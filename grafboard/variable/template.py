"""Templated variable model shared by every variable kind."""

from __future__ import annotations

from dataclasses import dataclass, field

ALL_TEXT = "All"
ALL_VALUE = "$__all"


@dataclass
class VariableOption:
    """One selectable entry of a templated variable."""

    text: str
    value: str


@dataclass
class Current:
    """The currently selected value of a templated variable."""

    text: list[str]
    value: str


@dataclass
class TemplateVar:
    """A dashboard templated variable, as serialised in a dashboard model."""

    name: str
    label: str
    type: str
    options: list[VariableOption] = field(default_factory=list)
    query: str = ""
    regex: str = ""
    hide: int = 0
    multi: bool = False
    include_all: bool = False
    all_value: str = ""
    datasource: str | None = None
    sort: int = 0
    refresh: int | None = None
    current: Current | None = None

    def add_option(self, text: str, value: str) -> VariableOption:
        """Append a selectable option and return it."""
        option = VariableOption(text=text, value=value)
        self.options.append(option)
        return option
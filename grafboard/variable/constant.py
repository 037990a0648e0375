"""The "constant" templated variable, and the options shared by templated variables."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from grafboard.variable.template import Current, TemplateVar

Option = Callable[[Any], None]


def _builder_setter(attribute: str, value: Any) -> Option:
    """Return an option setting one attribute of a variable's builder."""

    def apply(variable: Any) -> None:
        setattr(variable.builder, attribute, value)

    return apply


class _Variable:
    """A templated variable: a builder configured by a sequence of options."""

    _type = ""

    def __init__(self, name: str, *options: Option) -> None:
        self.builder = TemplateVar(name=name, label=name, type=self._type)
        for opt in (*self._defaults(), *options):
            opt(self)

    def _defaults(self) -> Iterable[Option]:
        return ()


class _MappedVariable(_Variable):
    """A templated variable whose values come from a label to value mapping."""

    def __init__(self, name: str, *options: Option) -> None:
        self._values: dict[str, str] = {}
        super().__init__(name, *options)


class Constant(_MappedVariable):
    """A "constant" templated variable."""

    _type = "constant"


def values(values: dict[str, str]) -> Option:
    """Set the possible values, as a label to value mapping."""

    def apply(variable: Any) -> None:
        for label_text, value in values.items():
            variable.builder.add_option(label_text, value)
        variable._values = dict(values)
        variable.builder.query = ",".join(sorted(values.values()))

    return apply


def default(value: str) -> Option:
    """Set the default value of the variable."""

    def apply(variable: Any) -> None:
        text = next(
            (lbl for lbl, candidate in variable._values.items() if candidate == value),
            value,
        )
        variable.builder.current = Current(text=[text], value=value)

    return apply


def label(label: str) -> Option:
    """Set the label of the variable."""
    return _builder_setter("label", label)


def hide_label() -> Option:
    """Hide the label of the variable."""
    return _builder_setter("hide", 1)


def hide() -> Option:
    """Hide the variable entirely."""
    return _builder_setter("hide", 2)
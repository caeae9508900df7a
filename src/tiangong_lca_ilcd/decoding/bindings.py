"""Declarative element-to-field rules used to build data set models.

A :class:`Binding` ties a dataclass to a list of :class:`FieldRule` objects.
Each rule names a model field, the path of the element (or attribute) it is
read from and how the raw text is converted. Bindings are checked against
their model when they are created, so a misspelled field name fails at
import time instead of silently leaving a value empty.

Paths are relative to the bound element and use local element names only;
namespaces are ignored when matching:

* ``"a/b"`` selects ``<b>`` children of ``<a>`` children,
* ``"a/@attr"`` reads the ``attr`` attribute of ``<a>``,
* ``"."`` is the bound element's own character data.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Generic, Literal, TypeVar
from xml.etree.ElementTree import Element

from tiangong_lca_ilcd.core.constants import XML_LANG_ATTRIBUTE
from tiangong_lca_ilcd.core.exceptions import BindingError, DecodeError
from tiangong_lca_ilcd.datasets.commons import LangString, LangStringItem

T = TypeVar("T")

FieldKind = Literal["text", "integer", "number", "lang", "texts", "integers", "one", "many"]

_SCALAR_KINDS = frozenset({"text", "integer", "number"})
_LIST_KINDS = frozenset({"texts", "integers"})
_NESTED_KINDS = frozenset({"one", "many"})


@dataclass(frozen=True, slots=True)
class FieldRule:
    """Binds one model field to an element path."""

    name: str
    path: str
    kind: FieldKind
    binding: "Binding[Any] | None" = None

    @property
    def steps(self) -> tuple[str, ...]:
        return _split_path(self.path)[0]

    @property
    def attribute(self) -> str | None:
        return _split_path(self.path)[1]


def text(name: str, path: str) -> FieldRule:
    return FieldRule(name, path, "text")


def integer(name: str, path: str) -> FieldRule:
    return FieldRule(name, path, "integer")


def number(name: str, path: str) -> FieldRule:
    return FieldRule(name, path, "number")


def lang(name: str, path: str) -> FieldRule:
    return FieldRule(name, path, "lang")


def texts(name: str, path: str) -> FieldRule:
    return FieldRule(name, path, "texts")


def integers(name: str, path: str) -> FieldRule:
    return FieldRule(name, path, "integers")


def one(name: str, path: str, binding: "Binding[Any]") -> FieldRule:
    return FieldRule(name, path, "one", binding)


def many(name: str, path: str, binding: "Binding[Any]") -> FieldRule:
    return FieldRule(name, path, "many", binding)


@dataclass(frozen=True, slots=True)
class Binding(Generic[T]):
    """Rules for building ``model`` from an element.

    ``root`` is set for document bindings and names the expected local name of
    the document element.
    """

    model: type[T]
    rules: tuple[FieldRule, ...]
    root: str | None = None

    def __post_init__(self) -> None:
        model_name = getattr(self.model, "__name__", repr(self.model))
        if not is_dataclass(self.model):
            raise BindingError(f"Binding target {model_name} is not a dataclass")
        known = {model_field.name for model_field in fields(self.model)}
        seen: set[str] = set()
        for rule in self.rules:
            if rule.name not in known:
                raise BindingError(f"{model_name} has no field '{rule.name}'")
            if rule.name in seen:
                raise BindingError(f"{model_name}.{rule.name} is bound twice")
            seen.add(rule.name)
            _check_rule(model_name, rule)

    def decode(self, element: Element) -> T:
        values: dict[str, Any] = {}
        for rule in self.rules:
            nodes = select(element, rule.steps)
            if not nodes:
                continue
            attribute = rule.attribute
            if attribute is not None:
                nodes = [node for node in nodes if attribute in node.attrib]
                if not nodes:
                    continue
            values[rule.name] = _convert(rule, nodes)
        return self.model(**values)


def _check_rule(model_name: str, rule: FieldRule) -> None:
    label = f"{model_name}.{rule.name}"
    if rule.kind not in _SCALAR_KINDS | _LIST_KINDS | _NESTED_KINDS | {"lang"}:
        raise BindingError(f"{label}: unknown rule kind '{rule.kind}'")
    try:
        steps, attribute = _split_path(rule.path)
    except ValueError as exc:
        raise BindingError(f"{label}: {exc}") from exc
    if rule.kind in _NESTED_KINDS:
        if rule.binding is None:
            raise BindingError(f"{label}: '{rule.kind}' rules need a nested binding")
        if attribute is not None:
            raise BindingError(f"{label}: nested rules cannot target an attribute")
    elif rule.binding is not None:
        raise BindingError(f"{label}: '{rule.kind}' rules take no nested binding")
    if rule.kind == "lang" and attribute is not None:
        raise BindingError(f"{label}: multi-language rules cannot target an attribute")
    if rule.kind in _NESTED_KINDS | {"lang"} and not steps:
        raise BindingError(f"{label}: '{rule.kind}' rules need an element path")


def _split_path(path: str) -> tuple[tuple[str, ...], str | None]:
    if path == ".":
        return (), None
    parts = path.split("/")
    attribute: str | None = None
    if parts[-1].startswith("@"):
        attribute = parts.pop()[1:]
        if not attribute:
            raise ValueError(f"empty attribute name in path '{path}'")
    if any(not part or part.startswith("@") or part == "." for part in parts):
        raise ValueError(f"invalid path '{path}'")
    return tuple(parts), attribute


def local_name(tag: Any) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on qualified tags."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def select(element: Element, steps: tuple[str, ...]) -> list[Element]:
    """Return all elements reached from ``element`` along ``steps``, in document order."""
    nodes = [element]
    for step in steps:
        nodes = [child for node in nodes for child in node if local_name(child.tag) == step]
        if not nodes:
            break
    return nodes


def chardata(element: Element) -> str:
    """Character data directly inside ``element``, excluding child elements."""
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts).strip()


def _raw(node: Element, attribute: str | None) -> str:
    if attribute is None:
        return chardata(node)
    return node.attrib.get(attribute, "").strip()


def _convert(rule: FieldRule, nodes: list[Element]) -> Any:
    attribute = rule.attribute
    if rule.kind == "text":
        return _raw(nodes[0], attribute)
    if rule.kind == "integer":
        return _to_int(rule, _raw(nodes[0], attribute))
    if rule.kind == "number":
        return _to_float(rule, _raw(nodes[0], attribute))
    if rule.kind == "texts":
        return tuple(value for value in (_raw(node, attribute) for node in nodes) if value)
    if rule.kind == "integers":
        return tuple(_to_int(rule, _raw(node, attribute)) for node in nodes)
    if rule.kind == "lang":
        return LangString(
            tuple(
                LangStringItem(lang=node.attrib.get(XML_LANG_ATTRIBUTE, ""), value=chardata(node))
                for node in nodes
            )
        )
    assert rule.binding is not None
    if rule.kind == "one":
        return rule.binding.decode(nodes[0])
    return tuple(rule.binding.decode(node) for node in nodes)


def _to_int(rule: FieldRule, value: str) -> int:
    if not value:
        return 0
    try:
        return int(value)
    except ValueError as exc:
        raise DecodeError(f"Field '{rule.name}' ({rule.path}) is not an integer: {value!r}") from exc


def _to_float(rule: FieldRule, value: str) -> float:
    if not value:
        return 0.0
    try:
        return float(value)
    except ValueError as exc:
        raise DecodeError(f"Field '{rule.name}' ({rule.path}) is not a number: {value!r}") from exc


__all__ = [
    "Binding",
    "FieldRule",
    "chardata",
    "integer",
    "integers",
    "lang",
    "local_name",
    "many",
    "number",
    "one",
    "select",
    "text",
    "texts",
]

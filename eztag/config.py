"""YAML render plans: which elements to render and how to join them."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .element import HtmlElement
from .html import ELEMENT_TYPES


class ElementEntry(BaseModel):
    """One element in a plan; every key besides ``kind`` is a field value."""

    kind: str = Field(..., description="Element kind, e.g. meta, title, stylesheet.")

    model_config = ConfigDict(extra="allow")

    def field_values(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class RenderPlan(BaseModel):
    """Top-level document of a render plan YAML file."""

    separator: str = Field("\n", description="String placed between rendered tags.")
    elements: List[ElementEntry] = Field(
        default_factory=list, description="Elements to render, in order."
    )


class PlanError(ValueError):
    """A render plan is malformed; ``errors`` lists every problem found."""

    def __init__(self, errors: List[str]) -> None:
        super().__init__("\n".join(errors))
        self.errors = errors


def load_render_plan(path: Path) -> RenderPlan:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise PlanError([f"{path}: render plan must be a mapping."])
    try:
        return RenderPlan.model_validate(data)
    except ValidationError as exc:
        raise PlanError([f"{path}: {exc}"]) from exc


def build_elements(plan: RenderPlan) -> List[HtmlElement]:
    """Instantiate every plan entry, collecting errors across all entries."""

    elements: List[HtmlElement] = []
    errors: List[str] = []
    for index, entry in enumerate(plan.elements, start=1):
        element_type = ELEMENT_TYPES.get(entry.kind)
        if element_type is None:
            known = ", ".join(sorted(ELEMENT_TYPES))
            errors.append(f"element {index}: unknown kind '{entry.kind}' (known: {known})")
            continue
        try:
            elements.append(element_type.model_validate(entry.field_values()))
        except ValidationError as exc:
            errors.append(f"element {index} ({entry.kind}): {exc}")

    if errors:
        raise PlanError(errors)
    return elements


def render_plan(plan: RenderPlan) -> str:
    return plan.separator.join(element.render() for element in build_elements(plan))


__all__ = [
    "ElementEntry",
    "PlanError",
    "RenderPlan",
    "build_elements",
    "load_render_plan",
    "render_plan",
]

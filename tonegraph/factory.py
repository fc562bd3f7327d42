"""Creation of graph components from their display names."""

from __future__ import annotations

from typing import Callable

from tonegraph.component import Component
from tonegraph.generators import (
    RandomComponent,
    SawToothComponent,
    SinusComponent,
    SquareComponent,
    TriangleComponent,
)
from tonegraph.operators import (
    ADSRComponent,
    AddComponent,
    DelayComponent,
    MultiplyComponent,
    OutputComponent,
    RepeatComponent,
)

_REGISTRY: dict[str, Callable[[], Component]] = {
    "Output": OutputComponent,
    "Sinusoidal": SinusComponent,
    "Square": SquareComponent,
    "Triangle": TriangleComponent,
    "Saw Tooth": SawToothComponent,
    "Random": RandomComponent,
    "Add": AddComponent,
    "Multiply": MultiplyComponent,
    "Repeat": RepeatComponent,
    "Delay": DelayComponent,
    "ADSR": ADSRComponent,
}


def component_names() -> tuple[str, ...]:
    """Return the names of every component that can be created."""
    return tuple(_REGISTRY)


def create_component(name: str) -> Component:
    """Create a new component from its name.

    Raises ValueError when no component has that name.
    """
    try:
        factory = _REGISTRY[name]
    except KeyError:
        raise ValueError(f"unknown component name: {name!r}") from None
    return factory()
"""Signal graph nodes and their inputs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(eq=False)
class ComponentInput:
    """A named input of a component: a default value or a linked component."""

    name: str = "DEFAULT"
    parent: Component | None = field(default=None, repr=False)
    default_value: float = 0.0
    editable: bool = True
    linkable: bool = True
    component: Component | None = field(default=None, init=False, repr=False)

    def value(self, time: float) -> float:
        """Return the linked component's output, or the default value."""
        if self.component is not None:
            return self.component.output(time)
        return self.default_value

    def can_set_component(self, component: Component | None) -> bool:
        """Tell whether linking ``component`` here would not create a cycle."""
        return component is not None and not component.depends_on(self.parent)


class Component(ABC):
    """A node of the signal graph producing a value for each instant."""

    name = "Component"
    has_output = True
    removable = True

    def __init__(self) -> None:
        self.inputs: list[ComponentInput] = []

    def init(self) -> None:
        """Reset the state of every component feeding this one."""
        for component_input in self.inputs:
            if component_input.component is not None:
                component_input.component.init()

    @abstractmethod
    def output(self, time: float) -> float:
        """Return the value of the signal at ``time`` seconds."""

    @property
    def input_count(self) -> int:
        return len(self.inputs)

    def get_input(self, key: int | str) -> ComponentInput | None:
        """Find an input by position or by name; None when there is none."""
        if isinstance(key, str):
            return next((i for i in self.inputs if i.name == key), None)
        if 0 <= key < len(self.inputs):
            return self.inputs[key]
        return None

    def add_input(
        self,
        name: str,
        default_value: float = 0.0,
        editable: bool = True,
        linkable: bool = True,
    ) -> ComponentInput:
        """Append a new input owned by this component and return it."""
        component_input = ComponentInput(name, self, default_value, editable, linkable)
        self.inputs.append(component_input)
        return component_input

    def depends_on(self, component: Component | None) -> bool:
        """Tell whether ``component`` feeds this one, directly or not."""
        if component is None:
            return False
        return any(
            i.component is not None
            and (i.component is component or i.component.depends_on(component))
            for i in self.inputs
        )


class GeneratorComponent(Component):
    """Base of periodic oscillators with frequency, amplitude and offset."""

    def __init__(self) -> None:
        super().__init__()
        self.add_input("Frequency", 400.0)
        self.add_input("Amplitude", 1.0)
        self.add_input("Offset", 0.0)
        self._phase = 0.0
        self._prev_time = 0.0

    def init(self) -> None:
        super().init()
        self._phase = 0.0
        self._prev_time = 0.0

    def _step(self, time: float) -> tuple[float, float, float]:
        """Advance the phase to ``time``; return (phase, amplitude, offset)."""
        frequency = self.inputs[0].value(time)
        amplitude = self.inputs[1].value(time)
        offset = self.inputs[2].value(time)
        self._phase += (time - self._prev_time) * frequency
        self._prev_time = time
        return self._phase, amplitude, offset
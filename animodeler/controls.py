"""Model controls (named sliders) and the simulation synchronisation step."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from animodeler.particles import ParticleSystem

NAME_LIMIT = 128
TIME_EPSILON = 0.05


@dataclass
class ModelerControl:
    """A named slider with its range, step and current value."""

    name: str = ""
    minimum: float = 0.0
    maximum: float = 1.0
    stepsize: float = 0.1
    value: float = 0.0

    def __post_init__(self) -> None:
        self.name = self.name[:NAME_LIMIT]


def _camera_controls() -> list[ModelerControl]:
    return [
        ModelerControl("Azimuth", -20, 20, 0.5, 0.0),
        ModelerControl("Elevation", -1.6, 1.6, 0.5, 0.7),
        ModelerControl("Dolly", -100, 10, 0.5, -30.0),
        ModelerControl("Twist", -360, 360, 5.0, 0.0),
        ModelerControl("LookAt X", -50, 50, 0.5, 0.0),
        ModelerControl("LookAt Y", -50, 50, 0.5, 0.0),
        ModelerControl("LookAt Z", -50, 50, 0.5, 0.0),
        ModelerControl("FOV", 1, 180, 0.5, 30.0),
        ModelerControl("Near Clipping Plane", 1, 10, 1, 1),
        ModelerControl("Far Clipping Plane", 10, 1000, 10, 100),
    ]


class ControlSet:
    """The model's controls followed by the camera controls."""

    def __init__(self, controls: Iterable[ModelerControl]) -> None:
        model = [
            ModelerControl(c.name, c.minimum, c.maximum, c.stepsize, c.value) for c in controls
        ]
        self.model_count = len(model)
        self.controls = model + _camera_controls()
        self.callback: Callable[[], None] | None = None

    def __len__(self) -> int:
        return len(self.controls)

    def value(self, index: int) -> float:
        return self.controls[index].value

    def set_value(self, index: int, value: float) -> None:
        """Set a control's value and notify the change callback."""
        self.controls[index].value = value
        if self.callback is not None:
            self.callback()

    def names(self) -> list[str]:
        return [c.name for c in self.controls]


def sync_simulation(
    particle_system: ParticleSystem | None,
    current_time: float,
    play_end_time: float,
    ui_simulate: bool,
) -> bool:
    """Bring the particle system and the simulate switch into agreement.

    The simulation stops near the end of the play range. If the system changed
    its own state, the switch follows it; otherwise the system follows the
    switch. Returns the new state of the switch.
    """
    if particle_system is None:
        return ui_simulate

    if particle_system.simulate and current_time >= play_end_time - TIME_EPSILON:
        particle_system.stop_simulation(current_time)

    simulating = particle_system.simulate
    if simulating != ui_simulate:
        if particle_system.dirty:
            ui_simulate = simulating
        elif ui_simulate:
            particle_system.start_simulation(current_time)
        else:
            particle_system.stop_simulation(current_time)
    particle_system.dirty = False
    return ui_simulate
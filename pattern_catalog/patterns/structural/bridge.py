"""Bridge pattern - remote controls decoupled from the devices they drive.

Remotes (the abstraction) hold a ``Device`` (the implementation) and
delegate to it, so either side can change without touching the other.
"""
from abc import ABC, abstractmethod
from typing import List

MIN_VOLUME = 0
MAX_VOLUME = 100
VOLUME_STEP = 10


class Device(ABC):
    """Implementation side of the bridge."""

    name: str = "Device"

    def __init__(self) -> None:
        self._enabled = False
        self._volume = 30

    def is_enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    @property
    def volume(self) -> int:
        return self._volume

    @volume.setter
    def volume(self, value: int) -> None:
        self._volume = max(MIN_VOLUME, min(MAX_VOLUME, value))

    @abstractmethod
    def status(self) -> str:
        """Describe the device state."""


class Television(Device):
    name = "Television"

    def status(self) -> str:
        state = "on" if self.is_enabled() else "off"
        return f"{self.name} is {state}, volume {self.volume}"


class Radio(Device):
    name = "Radio"

    def status(self) -> str:
        state = "playing" if self.is_enabled() else "silent"
        return f"{self.name} is {state}, volume {self.volume}"


class RemoteControl:
    """Abstraction side of the bridge."""

    def __init__(self, device: Device):
        self.device = device

    def toggle_power(self) -> bool:
        """Flip the power state and return the new one."""
        if self.device.is_enabled():
            self.device.disable()
        else:
            self.device.enable()
        return self.device.is_enabled()

    def volume_up(self) -> int:
        self.device.volume = self.device.volume + VOLUME_STEP
        return self.device.volume

    def volume_down(self) -> int:
        self.device.volume = self.device.volume - VOLUME_STEP
        return self.device.volume


class AdvancedRemoteControl(RemoteControl):
    """Refined abstraction adding a mute button."""

    def mute(self) -> int:
        self.device.volume = MIN_VOLUME
        return self.device.volume


def demonstrate() -> List[str]:
    lines = []
    for remote in (RemoteControl(Television()), AdvancedRemoteControl(Radio())):
        remote.toggle_power()
        remote.volume_up()
        lines.append(remote.device.status())
        if isinstance(remote, AdvancedRemoteControl):
            remote.mute()
            lines.append(remote.device.status())
    return lines

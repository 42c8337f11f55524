"""Adapter pattern - expose a legacy engine through the modern interface."""
from abc import ABC, abstractmethod
from typing import List


class Engine(ABC):
    """Interface every engine offers to the rest of the vehicle."""

    @abstractmethod
    def start(self) -> str:
        """Start the engine and report what happened."""


class ElectricEngine(Engine):
    def start(self) -> str:
        return "Electric engine started"


class LegacyEngine:
    """Engine with an incompatible API that cannot be changed."""

    def ignite(self, sparks: int) -> str:
        return f"Legacy engine ignited with {sparks} spark(s)"


class EngineAdapter(Engine):
    """Adapter implementing ``Engine`` on top of ``LegacyEngine``."""

    def __init__(self, legacy_engine: LegacyEngine, sparks: int = 1):
        self._legacy_engine = legacy_engine
        self._sparks = sparks

    def start(self) -> str:
        return f"Adapter: {self._legacy_engine.ignite(self._sparks)}"


def demonstrate() -> List[str]:
    engines: List[Engine] = [ElectricEngine(), EngineAdapter(LegacyEngine())]
    return [engine.start() for engine in engines]

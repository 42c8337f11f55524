"""Registry holding one lazily created instance per class."""

import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from pattern_catalog.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Process-wide registry of singleton instances.

    Each class is instantiated at most once; the first caller creates the
    instance while holding the registry lock, later callers receive the same
    object. The registry itself is created with double-checked locking.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self._instances: Dict[Type[Any], Any] = {}
        self._instances_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the registry, creating it on first use."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of ``singleton_class``, creating it if needed.

        Constructor arguments are only used for the first creation.
        """
        instance = self._instances.get(singleton_class)
        if instance is not None:
            return cast(T, instance)

        with self._instances_lock:
            instance = self._instances.get(singleton_class)
            if instance is None:
                instance = singleton_class(*args, **kwargs)
                self._instances[singleton_class] = instance
                self._logger.debug("Created singleton instance of %s", singleton_class.__name__)
        return cast(T, instance)

    def has(self, singleton_class: Type[Any]) -> bool:
        return singleton_class in self._instances

    def reset(self, singleton_class: Optional[Type[Any]] = None) -> None:
        """Discard one instance, or all of them when no class is given."""
        with self._instances_lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)

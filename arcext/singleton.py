"""Process-wide singletons kept alive by a shared manager."""

from __future__ import annotations

import threading
from typing import Any, Callable, ClassVar, TypeVar

T = TypeVar("T", bound="Singleton")

_LOCK = threading.RLock()


class SingletonManager:
    """Owns singleton objects and releases them newest first."""

    def __init__(self) -> None:
        self._objects: list[Any] = []

    def store(self, obj: Any) -> Any:
        """Keep ``obj`` alive and return it."""
        with _LOCK:
            self._objects.append(obj)
            return obj

    def clear(self, obj: Any) -> None:
        """Release ``obj`` if it is held, keeping the order of the others."""
        with _LOCK:
            kept = [item for item in self._objects if item is not obj]
            removed = len(kept) != len(self._objects)
            self._objects = kept
        if removed:
            _release(obj)

    def shutdown(self) -> None:
        """Release every held object, the most recently stored first."""
        with _LOCK:
            objects = self._objects
            self._objects = []
        for obj in reversed(objects):
            _release(obj)

    def __len__(self) -> int:
        return len(self._objects)


def _release(obj: Any) -> None:
    if isinstance(obj, Singleton):
        obj._release_singleton()


_MANAGER = SingletonManager()


def get_manager() -> SingletonManager:
    """The manager that holds all singletons of this process."""
    return _MANAGER


class Singleton:
    """Base class giving a subclass one shared instance.

    Subclasses declared with ``auto_init=False`` must be given their
    instance through :meth:`install` before :meth:`instance` is used.
    """

    _auto_init: ClassVar[bool] = True
    _instance: ClassVar[Any] = None
    _initialized: ClassVar[bool] = False

    def __init_subclass__(cls, auto_init: bool = True, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._auto_init = auto_init
        cls._instance = None
        cls._initialized = False

    @classmethod
    def _adopt(cls, obj: Any) -> None:
        obj._singleton_owner = cls
        cls._initialized = True
        cls._instance = get_manager().store(obj)

    def _release_singleton(self) -> None:
        owner = getattr(self, "_singleton_owner", None)
        if owner is not None and owner._instance is self:
            owner._instance = None
            owner._initialized = False

    @classmethod
    def instance(cls: type[T]) -> T:
        """Return the shared instance, creating it when auto-initialised."""
        with _LOCK:
            if cls._auto_init:
                if not cls._initialized:
                    cls._adopt(cls())
            elif cls._instance is None:
                raise RuntimeError(
                    f"{cls.__name__} is not auto-initialised and was not installed"
                )
            return cls._instance

    @classmethod
    def install(cls: type[T], obj: T) -> T:
        """Use ``obj`` as the shared instance unless one already exists."""
        if not isinstance(obj, cls):
            raise TypeError(f"{type(obj).__name__} is not a {cls.__name__}")
        with _LOCK:
            if not cls._initialized:
                cls._adopt(obj)
            return cls._instance

    @classmethod
    def with_instance(cls: type[T], action: Callable[[T], Any]) -> None:
        """Call ``action`` with the shared instance if there is one."""
        current = cls._instance
        if current is not None:
            action(current)

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance from the manager."""
        with _LOCK:
            if cls._initialized:
                current = cls._instance
                if current is not None:
                    get_manager().clear(current)
                cls._instance = None
                cls._initialized = False
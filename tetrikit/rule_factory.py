"""Registry of rotation systems, looked up by name."""

from __future__ import annotations

from .rotation_system import RotationSystem


class RuleFactory:
    """Keeps prototype rotation systems and hands out copies of them."""

    def __init__(self) -> None:
        self._systems: dict[str, RotationSystem] = {}

    def register(self, name: str, system: RotationSystem) -> None:
        """Register ``system`` under ``name``, replacing any earlier one."""
        self._systems[name] = system

    def create(self, name: str) -> RotationSystem | None:
        """Return a fresh copy of the named system, or None if it is unknown."""
        prototype = self._systems.get(name)
        if prototype is None:
            return None
        return prototype.clone()

    def names(self) -> list[str]:
        """Names of all registered systems, sorted."""
        return sorted(self._systems)


_instance: RuleFactory | None = None


def get_rule_factory() -> RuleFactory:
    """Return the shared rule factory."""
    global _instance
    if _instance is None:
        _instance = RuleFactory()
    return _instance
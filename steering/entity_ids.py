"""Type-safe agent identifiers.

Behaviours reference their target through an ``AgentId`` handle instead of
holding the agent object. The registry resolves the handle on every read,
so a removed target resolves to ``None`` rather than a stale agent.

Usage:
------
    agent_id = registry.register(agent)   # AgentId(1)
    print(agent_id)                       # "Agent#1"
    registry.get(agent_id)                # the agent, or None once removed

Design Notes:
- IDs are immutable (frozen dataclass)
- IDs are hashable (can be used in sets/dicts)
- IDs can be compared to raw ints for compatibility
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AgentId:
    """Handle for an agent registered in an AgentRegistry."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int):
            raise TypeError(f"AgentId value must be int, got {type(self.value).__name__}")

    def __str__(self) -> str:
        return f"Agent#{self.value}"

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, AgentId):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("agent", self.value))


__all__ = ["AgentId"]

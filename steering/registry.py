"""Agent registry resolving AgentId handles to live agents."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional

from steering.agent import Agent
from steering.entity_ids import AgentId
from steering.math_utils import Vector2

logger = logging.getLogger(__name__)


class AgentRegistry:
    """Owns the id -> agent mapping for one simulation.

    Handles never dangle: once an agent is removed, ``get`` and
    ``position_of`` return None for every handle that pointed at it.
    """

    def __init__(self) -> None:
        self._agents: Dict[AgentId, Agent] = {}
        self._next_id = 1

    def register(self, agent: Agent) -> AgentId:
        """Register ``agent`` and return its handle.

        Registering an agent twice returns the existing handle.
        """
        if agent.id is not None and agent.registry is self:
            return agent.id
        agent_id = AgentId(self._next_id)
        self._next_id += 1
        agent.id = agent_id
        agent.registry = self
        self._agents[agent_id] = agent
        logger.debug("Registered %s", agent_id)
        return agent_id

    def remove(self, agent_id: AgentId) -> Optional[Agent]:
        """Remove and return the agent for ``agent_id`` (None if unknown)."""
        agent = self._agents.pop(agent_id, None)
        if agent is not None:
            agent.registry = None
            logger.debug("Removed %s", agent_id)
        return agent

    def get(self, agent_id: Optional[AgentId]) -> Optional[Agent]:
        if agent_id is None:
            return None
        return self._agents.get(agent_id)

    def position_of(self, agent_id: Optional[AgentId]) -> Optional[Vector2]:
        """Current position of the agent behind ``agent_id``, if still present."""
        agent = self.get(agent_id)
        return agent.position if agent is not None else None

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._agents

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self) -> Iterator[Agent]:
        return iter(list(self._agents.values()))

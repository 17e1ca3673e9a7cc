"""Tests for agent ids and the registry."""

from steering.agent import Agent
from steering.entity_ids import AgentId
from steering.math_utils import Vector2


class TestAgentId:
    def test_string_and_int_forms(self):
        agent_id = AgentId(3)
        assert str(agent_id) == "Agent#3"
        assert int(agent_id) == 3

    def test_compares_with_ints(self):
        assert AgentId(3) == 3
        assert AgentId(3) == AgentId(3)
        assert AgentId(3) != AgentId(4)

    def test_hashable(self):
        assert len({AgentId(1), AgentId(1), AgentId(2)}) == 2


class TestAgentRegistry:
    def test_ids_start_at_one(self, registry):
        first = registry.register(Agent())
        second = registry.register(Agent())
        assert (first, second) == (AgentId(1), AgentId(2))

    def test_register_is_idempotent(self, registry):
        agent = Agent()
        assert registry.register(agent) == registry.register(agent)
        assert len(registry) == 1

    def test_lookup(self, registry):
        agent = Agent(2, 3, name="a")
        agent_id = registry.register(agent)
        assert agent_id in registry
        assert registry.get(agent_id) is agent
        assert registry.position_of(agent_id) == Vector2(2, 3)
        assert list(registry) == [agent]

    def test_removed_handles_resolve_to_none(self, registry):
        agent = Agent()
        agent_id = registry.register(agent)
        assert registry.remove(agent_id) is agent
        assert registry.get(agent_id) is None
        assert registry.position_of(agent_id) is None
        assert agent.registry is None

    def test_unknown_handles(self, registry):
        assert registry.get(None) is None
        assert registry.remove(AgentId(99)) is None


def test_agent_forward_follows_rotation():
    agent = Agent(rotation=90)
    assert agent.forward == Vector2(0, 1)

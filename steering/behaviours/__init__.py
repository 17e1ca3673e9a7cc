"""Steering behaviours.

Every behaviour proposes a desired velocity; attach them to a
SteeringManager to have the proposals blended into motion.
"""

from steering.behaviours.avoid import Avoid
from steering.behaviours.base import Behaviour
from steering.behaviours.flow import FlowFollow
from steering.behaviours.pursuit import Evade, Pursuit, PursuitState
from steering.behaviours.seek import Arrival, Eschew, Flee, Magnet, Seek
from steering.behaviours.wander import Wander

__all__ = [
    "Arrival",
    "Avoid",
    "Behaviour",
    "Eschew",
    "Evade",
    "Flee",
    "FlowFollow",
    "Magnet",
    "Pursuit",
    "PursuitState",
    "Seek",
    "Wander",
]

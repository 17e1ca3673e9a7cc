"""Configuration package for the steering engine.

Constants live in ``behaviours`` (defaults and floors of every tunable)
and ``display`` (debug drawing); ``simulation_config`` groups them into
dataclasses consumed by managers and worlds.
"""

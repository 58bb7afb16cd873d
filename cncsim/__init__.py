"""Deterministic model of CNC machining: geometry, tools, machines, kinematics, material and jobs."""

__version__ = "0.1.0"
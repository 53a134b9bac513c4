"""Dash building blocks for the planner UI."""

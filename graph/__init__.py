"""Dependency graph model and node styling."""

from .model import DependencyGraph, Edge, Node
from .styles import NEUTRAL_COLOR, color_for

__all__ = ["DependencyGraph", "Edge", "Node", "NEUTRAL_COLOR", "color_for"]

"""Diagram emission exports."""

from typeplane.emit.driver import DiagramDriver, member_lines
from typeplane.emit.plantuml import PlantUMLWriter
from typeplane.emit.statements import Declare, Relate, Statement

__all__ = [
    "Declare",
    "DiagramDriver",
    "PlantUMLWriter",
    "Relate",
    "Statement",
    "member_lines",
]

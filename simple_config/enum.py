"""
Simple Config Enumerations

Version: 1.0.0
"""

from enum import Enum


class BlockState(str, Enum):
    """Evaluation state of a deferred setting block."""
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


class MemberKind(str, Enum):
    """Kind of member declared on a namespace."""
    SETTING = "setting"
    NAMESPACE = "namespace"

"""
Component capability for application building blocks.
"""

from abc import ABC, abstractmethod


class Component(ABC):
    """
    Base class for application components.

    An orchestrator calls `build` once, after services are resolvable.
    """

    @abstractmethod
    def build(self) -> None:
        """Actually build the component."""
        pass

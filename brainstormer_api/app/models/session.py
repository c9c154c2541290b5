"""Brainstorm sessions and the ideas collected in them."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class Idea:
    """A single brainstorming item.  Immutable once added to a session."""

    name: str
    description: Optional[str]
    date_created: datetime
    id: int = 0


@dataclass
class BrainstormSession:
    """A brainstorming session and its ideas in insertion order.

    ``id`` is ``0`` until the repository assigns one.
    """

    name: str
    date_created: datetime
    id: int = 0
    ideas: List[Idea] = field(default_factory=list)

    def add_idea(self, idea: Idea) -> Idea:
        """Append ``idea``, giving it the next id within this session."""
        idea.id = max((existing.id for existing in self.ideas), default=0) + 1
        self.ideas.append(idea)
        return idea

    @property
    def idea_count(self) -> int:
        return len(self.ideas)

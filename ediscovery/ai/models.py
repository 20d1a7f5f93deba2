from dataclasses import dataclass


@dataclass(frozen=True)
class TagSuggestion:
    """A suggested document category with the model's confidence (0.0-1.0)."""

    name: str
    confidence: float


@dataclass(frozen=True)
class AIModelBinding:
    """Model name and sampling temperature used for every call to one client."""

    model: str
    temperature: float = 0.2

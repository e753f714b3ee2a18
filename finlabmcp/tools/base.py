from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ToolContext:
    tool_name: str
    arguments: dict[str, Any] = field(default_factory=dict)


class Tool(ABC):
    name: str

    @abstractmethod
    def run(self, context: ToolContext) -> str:
        raise NotImplementedError

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .base import Tool


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    tool: Tool
    schema: dict[str, object]

    def validate_args(self, args: dict[str, Any] | None) -> dict[str, Any]:
        if args is None:
            args = {}
        if not isinstance(args, dict):
            raise ValueError(f"Tool '{self.name}' args must be an object.")

        properties = self.schema.get("properties")
        if not isinstance(properties, dict):
            return dict(args)

        clean: dict[str, Any] = {}
        for key, value in args.items():
            prop = properties.get(key)
            if not isinstance(prop, dict) or value is None:
                continue
            expected = prop.get("type")
            if expected == "string":
                if not isinstance(value, str):
                    raise ValueError(f"Tool '{self.name}' arg '{key}' must be a string.")
            elif expected == "integer":
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ValueError(f"Tool '{self.name}' arg '{key}' must be an integer.")
            elif expected == "object":
                if not isinstance(value, dict):
                    raise ValueError(f"Tool '{self.name}' arg '{key}' must be an object.")
            elif expected == "array":
                if not isinstance(value, list):
                    raise ValueError(f"Tool '{self.name}' arg '{key}' must be an array.")
            clean[key] = value

        for key, prop in properties.items():
            if key not in clean and isinstance(prop, dict) and "default" in prop:
                clean[key] = prop["default"]
        return clean

    def descriptor(self) -> dict[str, object]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.schema,
        }


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}

    def register(
        self,
        *,
        tool: Tool,
        description: str,
        schema: dict[str, object],
    ) -> None:
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered.")
        self._tools[tool.name] = ToolDefinition(
            name=tool.name,
            description=description,
            tool=tool,
            schema=schema,
        )

    def find(self, name: str | None) -> ToolDefinition | None:
        if not isinstance(name, str):
            return None
        return self._tools.get(name)

    def descriptors(self) -> list[dict[str, object]]:
        return [definition.descriptor() for definition in self._tools.values()]

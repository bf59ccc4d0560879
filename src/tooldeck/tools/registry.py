"""Published tool set handed to the HTTP layer."""

import logging
from typing import Any

from tooldeck.errors import ToolExecutionError, ToolNotFoundError
from tooldeck.tools.types import ToolDescriptor

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Holds the merged tools by exact name and runs them.

    Only bare ToolDescriptor values are registered; where a tool came from
    stays with the DiscoveryResult.
    """

    def __init__(self, tools: list[ToolDescriptor] | None = None) -> None:
        self._tools: dict[str, ToolDescriptor] = {}
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: ToolDescriptor) -> None:
        self._tools[tool.name] = tool
        logger.debug(f"Registered tool {tool.name}")

    def list_tools(self) -> list[ToolDescriptor]:
        return list(self._tools.values())

    def get(self, name: str) -> ToolDescriptor:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError(name) from None

    async def call(self, name: str, arguments: dict[str, Any] | None = None) -> str:
        """Run a tool and return its text result.

        Raises:
            ToolNotFoundError: If no tool has this name
            ToolExecutionError: If the tool raised
        """
        tool = self.get(name)
        try:
            return await tool.invoke(arguments or {})
        except Exception as e:
            logger.error(f"Tool '{name}' failed: {e}")
            raise ToolExecutionError(f"Tool execution failed: {e}") from e

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

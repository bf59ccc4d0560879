"""Data types for tool discovery.

This module defines the core data structures produced by the path resolver,
the source scanner and the merge engine. All of them are immutable and are
rebuilt on every discovery pass.
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

SourceKind = Literal["global", "local"]
ResolutionSource = Literal["explicit-override", "environment", "default"]

ToolRun = Callable[[dict[str, Any]], Awaitable[str] | str]


@dataclass(frozen=True)
class ToolDescriptor:
    """A named capability with an input schema and a run callable."""

    name: str
    input_schema: Mapping[str, Any]
    run: ToolRun
    description: str | None = None

    async def invoke(self, arguments: dict[str, Any] | None = None) -> str:
        """Call the tool and return its result as text.

        The run callable may be sync or async. A sync callable runs in a worker
        thread so it cannot stall the event loop; awaitable results are awaited.
        """
        args = arguments or {}
        if inspect.iscoroutinefunction(self.run):
            result = await self.run(args)
        else:
            result = await asyncio.to_thread(self.run, args)
        if inspect.isawaitable(result):
            result = await result
        return str(result)


@dataclass(frozen=True)
class DiscoveredEntry:
    """A validated tool together with where it was found."""

    tool: ToolDescriptor
    source_kind: SourceKind
    source_directory: Path
    origin_file: str

    @property
    def name(self) -> str:
        return self.tool.name


@dataclass(frozen=True)
class DiscoverySummary:
    """Counts for a discovery result."""

    total: int = 0
    global_count: int = 0
    local_count: int = 0
    conflict_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class DiscoveryResult:
    """Entries found by a scan or a merge, plus a summary and advisories."""

    entries: tuple[DiscoveredEntry, ...] = ()
    summary: DiscoverySummary = field(default_factory=DiscoverySummary)
    warnings: tuple[str, ...] = ()

    @classmethod
    def empty(cls, warnings: Iterable[str] = ()) -> "DiscoveryResult":
        return cls(warnings=tuple(warnings))

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[DiscoveredEntry],
        conflict_names: Iterable[str] = (),
        warnings: Iterable[str] = (),
    ) -> "DiscoveryResult":
        """Build a result whose summary counts are computed from the entries."""
        entries = tuple(entries)
        summary = DiscoverySummary(
            total=len(entries),
            global_count=sum(1 for e in entries if e.source_kind == "global"),
            local_count=sum(1 for e in entries if e.source_kind == "local"),
            conflict_names=tuple(conflict_names),
        )
        return cls(entries=entries, summary=summary, warnings=tuple(warnings))

    def tools(self) -> list[ToolDescriptor]:
        """Return the bare tool descriptors, without provenance."""
        return [entry.tool for entry in self.entries]

    def find(self, name: str) -> DiscoveredEntry | None:
        """Find an entry by its exact tool name."""
        for entry in self.entries:
            if entry.tool.name == name:
                return entry
        return None

    def by_source(self, source_kind: SourceKind) -> list[DiscoveredEntry]:
        return [entry for entry in self.entries if entry.source_kind == source_kind]


@dataclass(frozen=True)
class ResolvedPath:
    """Outcome of resolving the global tools path."""

    path: Path
    resolution_source: ResolutionSource
    exists: bool


@dataclass(frozen=True)
class ValidationFailure:
    """Why a loaded value was rejected.

    Attributes:
        value_type: Type name of the rejected value
        failed_checks: Names of the capability checks that failed, any of
            "structured", "name", "run" and "input_schema"
    """

    value_type: str
    failed_checks: tuple[str, ...]

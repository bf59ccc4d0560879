"""Merging of global and local discovery results."""

import logging

from tooldeck.tools.types import DiscoveredEntry, DiscoveryResult

logger = logging.getLogger(__name__)


def _sort_key(entry: DiscoveredEntry) -> tuple[int, str]:
    return (0 if entry.source_kind == "global" else 1, entry.tool.name)


def merge_results(
    global_result: DiscoveryResult, local_result: DiscoveryResult
) -> DiscoveryResult:
    """Combine global and local tools into one deduplicated result.

    Names are compared case-insensitively. A local tool always replaces a
    global tool of the same name, and its name is recorded as a conflict.
    When two local tools share a name the later one wins and no conflict is
    recorded; conflicts are only tracked between the two sources.

    Entries are ordered global first, then local, each by name. Summary
    counts are recomputed from the merged entries.

    Args:
        global_result: Result of scanning the global source
        local_result: Result of scanning the local source

    Returns:
        The merged DiscoveryResult with sorted conflict names
    """
    by_name: dict[str, DiscoveredEntry] = {}
    conflicts: list[str] = []

    for entry in global_result.entries:
        by_name[entry.tool.name.lower()] = entry

    for entry in local_result.entries:
        key = entry.tool.name.lower()
        existing = by_name.get(key)
        if existing is not None and existing.source_kind == "global":
            conflicts.append(entry.tool.name)
            logger.warning(f"Local tool '{entry.tool.name}' overrides global tool")
        by_name[key] = entry

    merged = sorted(by_name.values(), key=_sort_key)

    return DiscoveryResult.from_entries(
        merged,
        conflict_names=sorted(conflicts),
        warnings=global_result.warnings + local_result.warnings,
    )

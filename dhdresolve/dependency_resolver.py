"""Order modules so that every module runs after the modules it depends on."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol


class _HasDependencies(Protocol):
    name: str
    dependencies: Sequence[str]


class DependencyError(Exception):
    """Base class for failures while resolving module dependencies."""


class CyclicDependencyError(DependencyError):
    """Raised when modules depend on each other in a loop."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        super().__init__(f"Cyclic dependency detected: {' -> '.join(self.cycle)}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CyclicDependencyError):
            return NotImplemented
        return self.cycle == other.cycle

    __hash__ = None  # type: ignore[assignment]


class MissingDependencyError(DependencyError):
    """Raised when a module depends on a module that is not present."""

    def __init__(self, module: str, dependency: str) -> None:
        self.module = module
        self.dependency = dependency
        super().__init__(
            f"Module '{module}' depends on '{dependency}' which was not found"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MissingDependencyError):
            return NotImplemented
        return (self.module, self.dependency) == (other.module, other.dependency)

    __hash__ = None  # type: ignore[assignment]


@dataclass
class ModuleSpec:
    """A named module with the names of the modules it depends on."""

    name: str
    dependencies: list[str] = field(default_factory=list)
    payload: Any = None


def resolve_dependencies(modules: Iterable[_HasDependencies]) -> list:
    """Return the modules in an order where dependencies come first.

    Any object with ``name`` and ``dependencies`` attributes is accepted.
    A later module with the same name replaces an earlier one.
    """
    module_map = {module.name: module for module in modules}

    graph: dict[str, list[str]] = {name: [] for name in module_map}
    in_degree: dict[str, int] = dict.fromkeys(module_map, 0)

    for name, module in module_map.items():
        for dep in module.dependencies:
            if dep not in module_map:
                raise MissingDependencyError(name, dep)
            graph[dep].append(name)
            in_degree[name] += 1

    queue = deque(name for name, degree in in_degree.items() if degree == 0)
    ordered: list[str] = []

    while queue:
        current = queue.popleft()
        ordered.append(current)
        for dependent in graph[current]:
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                queue.append(dependent)

    if len(ordered) != len(module_map):
        processed = set(ordered)
        unprocessed = [name for name in module_map if name not in processed]
        cycle = find_cycle(graph, unprocessed)
        raise CyclicDependencyError(cycle if cycle is not None else unprocessed)

    return [module_map[name] for name in ordered]


def find_cycle(
    graph: Mapping[str, Sequence[str]], start_nodes: Iterable[str]
) -> list[str] | None:
    """Find a cycle reachable from one of the start nodes.

    The cycle is returned as a path whose first and last names are equal,
    or ``None`` if no start node reaches a cycle.
    """
    for start in start_nodes:
        cycle = _dfs_find_cycle(start, graph, set(), [])
        if cycle is not None:
            return cycle
    return None


def _dfs_find_cycle(
    node: str,
    graph: Mapping[str, Sequence[str]],
    visited: set[str],
    path: list[str],
) -> list[str] | None:
    if node in path:
        return path[path.index(node):] + [node]
    if node in visited:
        return None

    visited.add(node)
    path.append(node)
    for neighbor in graph.get(node, ()):
        cycle = _dfs_find_cycle(neighbor, graph, visited, path)
        if cycle is not None:
            return cycle
    path.pop()
    return None
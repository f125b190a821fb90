"""Error types and the problem aggregator shared by the validators."""
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List, Optional

FIELD = "field"
HOOK = "hook"
TOPOLOGY = "topology"


class KindctlError(Exception):
    """Base class for kindctl errors."""
    pass


class ConfigLoadError(KindctlError):
    """A configuration file could not be read or decoded."""
    pass


class ClusterCreateError(KindctlError):
    """The orchestrator failed to bring up the cluster nodes."""
    pass


class ConfigErrors(KindctlError):
    """Aggregate validation failure carrying every problem found."""

    def __init__(self, problems: Iterable["ConfigProblem"]):
        self.problems = list(problems)
        super().__init__("\n".join(str(p) for p in self.problems))

    def errors(self) -> List[str]:
        """Return the ordered list of problem messages."""
        return [str(p) for p in self.problems]


@dataclass(frozen=True)
class ConfigProblem:
    """A single validation problem.

    ``node`` is the 0-based position of the offending node, or None for
    problems that concern the configuration as a whole.
    """
    message: str
    kind: str = FIELD
    node: Optional[int] = None

    def __str__(self) -> str:
        if self.node is None:
            return self.message
        return f"please fix invalid configuration for node {self.node}: {self.message}"


class ErrorList:
    """Ordered collection of problems found in one validation pass.

    An empty list is falsy and means the input is valid.
    """

    def __init__(self, problems: Optional[Iterable[ConfigProblem]] = None):
        self._problems: List[ConfigProblem] = list(problems or [])

    def add(self, message: str, kind: str = FIELD) -> "ErrorList":
        self._problems.append(ConfigProblem(message=message, kind=kind))
        return self

    def extend(self, problems: Iterable[ConfigProblem]) -> "ErrorList":
        self._problems.extend(problems)
        return self

    def wrap_node(self, index: int) -> "ErrorList":
        """Return a copy with every problem attributed to node ``index``."""
        return ErrorList(replace(p, node=index) for p in self._problems)

    def is_empty(self) -> bool:
        return not self._problems

    def problems(self) -> List[ConfigProblem]:
        return list(self._problems)

    def messages(self) -> List[str]:
        """Raw messages without the node prefix."""
        return [p.message for p in self._problems]

    def to_list(self) -> List[str]:
        return [str(p) for p in self._problems]

    def to_error(self) -> Optional[ConfigErrors]:
        if self.is_empty():
            return None
        return ConfigErrors(self._problems)

    def __iter__(self) -> Iterator[ConfigProblem]:
        return iter(list(self._problems))

    def __len__(self) -> int:
        return len(self._problems)

    def __bool__(self) -> bool:
        return bool(self._problems)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ErrorList):
            return NotImplemented
        return self._problems == other._problems

    def __repr__(self) -> str:
        return f"ErrorList({self.to_list()!r})"

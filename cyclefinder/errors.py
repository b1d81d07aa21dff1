# cyclefinder/errors.py
"""
Error types raised during a cycle-enumeration run

-----------------------------
Purpose:
    - Input-Unavailable: the edge source cannot be opened/read
    - Malformed-Record: a line does not parse as vertex, vertex, weight
    - Unknown-Vertex: an edge references a vertex outside the fixed set
    - Capacity-Exceeded: a configured bound would be overflowed
    - Configuration: a run option has an invalid value
"""

from typing import Any


class CycleFinderError(Exception):
    """Base class for every error raised by cyclefinder"""


class InputUnavailableError(CycleFinderError, OSError):
    """The edge-triple source could not be opened or read"""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read edge source {path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedRecordError(CycleFinderError, ValueError):
    """
    A line of the edge source is not a valid (vertex, vertex, weight) record

    Attributes
    ----------
    line_no : int
        1-based line number in the source
    line : str
        Raw line content (without trailing newline)
    """

    def __init__(self, line_no: int, line: str, reason: str) -> None:
        super().__init__(f"Malformed record at line {line_no}: {reason} ({line!r})")
        self.line_no = line_no
        self.line = line
        self.reason = reason


class UnknownVertexError(CycleFinderError, LookupError):
    """An edge or lookup referenced a vertex not in the graph's vertex set"""

    def __init__(self, vertex: Any) -> None:
        super().__init__(f"Unknown vertex: {vertex!r}")
        self.vertex = vertex


class CapacityExceededError(CycleFinderError):
    """A vertex, edge or cycle count exceeded its configured bound"""

    def __init__(self, what: str, limit: int) -> None:
        super().__init__(f"Capacity exceeded: more than {limit} {what}")
        self.what = what
        self.limit = limit


class ConfigurationError(CycleFinderError, ValueError):
    """A run option (malformed-record policy, length bound, ...) has an invalid value"""

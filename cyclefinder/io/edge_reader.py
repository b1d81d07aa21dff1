# cyclefinder/io/edge_reader.py
"""
Edge-list reader

-----------------------------
Purpose:
    - Read "<start> <end> <weight>" records from a text file
    - Validate each record (token count, integer weight >= 0)
    - Apply the malformed-record policy: skip (log and continue) or strict (raise)
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from cyclefinder import config
from cyclefinder.errors import ConfigurationError, InputUnavailableError, MalformedRecordError
from cyclefinder.graph.graph_store import Edge

log = logging.getLogger(__name__)

POLICY_SKIP = "skip"
POLICY_STRICT = "strict"
POLICIES = (POLICY_SKIP, POLICY_STRICT)


def parse_record(line: str, line_no: int) -> Optional[Edge]:
    """
    Parse one line into an Edge

    Returns
    -------
    Optional[Edge]
        None for blank lines and ``#`` comments

    Raises
    ------
    MalformedRecordError
        If the line is not exactly vertex, vertex, non-negative integer weight
    """
    text = line.strip()
    if not text or text.startswith("#"):
        return None

    tokens = text.split()
    if len(tokens) != 3:
        raise MalformedRecordError(line_no, line, f"expected 3 fields, got {len(tokens)}")

    start, end, raw_weight = tokens
    # ASCII digits with an optional sign, as "%d" reads them
    digits = raw_weight[1:] if raw_weight[:1] in "+-" else raw_weight
    if not (digits.isascii() and digits.isdigit()):
        raise MalformedRecordError(line_no, line, f"weight is not an integer: {raw_weight!r}")
    weight = int(raw_weight)
    if weight < 0:
        raise MalformedRecordError(line_no, line, f"negative weight: {weight}")

    return Edge(start, end, weight)


def iter_edges(lines: Iterable[str], policy: Optional[str] = None) -> Iterator[Edge]:
    """
    Yield edges from an iterable of text lines

    Parameters
    ----------
    lines : Iterable[str]
        Source lines
    policy : Optional[str]
        "skip" or "strict" (config.MALFORMED_POLICY if None)
    """
    policy = (policy or config.MALFORMED_POLICY).lower()
    if policy not in POLICIES:
        raise ConfigurationError(f"Unknown malformed-record policy: {policy!r} (use one of {POLICIES})")

    for line_no, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        try:
            edge = parse_record(line, line_no)
        except MalformedRecordError as e:
            if policy == POLICY_STRICT:
                raise
            log.warning("Skipping %s", e)
            continue
        if edge is not None:
            yield edge


def read_edges(path: Union[str, Path], policy: Optional[str] = None) -> List[Edge]:
    """
    Read every edge of an edge-list file

    The whole file is read before returning, so an unreadable source
    fails before any graph is built.

    Raises
    ------
    InputUnavailableError
        If the file cannot be opened or decoded
    MalformedRecordError
        Under the strict policy, on the first bad record
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        log.error("Edge source unavailable: %s", path)
        raise InputUnavailableError(str(path), str(e)) from e

    edges = list(iter_edges(lines, policy))
    log.info("Edges loaded: %d records from %s", len(edges), path)
    return edges

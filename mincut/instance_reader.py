"""
Reader and writer for graph instance files in the DIMACS-like edge format:

    c optional comment
    p edge <n> <m>
    e <u> <v>

Vertex ids in the file start at 1; the Graph uses 0-based ids.
"""
import os
from typing import Optional

import numpy as np

from mincut.errors import InputNotFound, MalformedInput
from mincut.graph import Graph


def _parse_ints(fields, count, line_number, what):
    if len(fields) != count:
        raise MalformedInput(f"expected {count} values in {what} line, got {len(fields)}",
                             line_number)
    try:
        return [int(x) for x in fields]
    except ValueError:
        raise MalformedInput(f"non-integer value in {what} line: {' '.join(fields)}",
                             line_number) from None


def read_col_instance(path) -> Graph:
    """
    Loads a graph instance file.

    Raises:
        InputNotFound: the file does not exist or cannot be opened.
        MalformedInput: a 'p' or 'e' line does not parse, an edge references a
            vertex outside 1..n, an edge appears before the 'p' line, or a line
            is not UTF-8 text.
    """
    try:
        f = open(path, 'rb')
    except OSError as exc:
        raise InputNotFound(f"cannot read instance file '{path}': {exc.strerror}") from exc

    n = None
    edges = []
    with f:
        for line_number, raw in enumerate(f, start=1):
            try:
                line = raw.decode('utf-8')
            except UnicodeDecodeError:
                raise MalformedInput("line is not valid UTF-8 text", line_number) from None
            if line.startswith('p'):
                fields = line.split()
                if len(fields) != 4 or fields[1] != 'edge':
                    raise MalformedInput("expected 'p edge <n> <m>'", line_number)
                n, _m = _parse_ints(fields[2:], 2, line_number, "'p'")
                if n < 2:
                    raise MalformedInput(f"a graph needs at least 2 vertices, got {n}",
                                         line_number)
            elif line.startswith('e'):
                if n is None:
                    raise MalformedInput("edge declared before the 'p edge' line", line_number)
                u, v = _parse_ints(line.split()[1:], 2, line_number, "'e'")
                if not (1 <= u <= n and 1 <= v <= n):
                    raise MalformedInput(f"edge ({u}, {v}) outside vertex range 1..{n}",
                                         line_number)
                edges.append((u - 1, v - 1))

    if n is None:
        raise MalformedInput(f"no 'p edge' line in '{path}'")

    return Graph(n, np.array(edges, dtype=np.int64).reshape(-1, 2))


def write_col_instance(graph: Graph, path, comment: Optional[str] = None) -> None:
    directory = os.path.dirname(os.fspath(path))
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, 'w') as f:
        if comment:
            for line in comment.splitlines():
                f.write(f"c {line}\n")
        f.write(f"p edge {graph.n} {graph.m}\n")
        for u, v in graph.edges.tolist():
            f.write(f"e {u + 1} {v + 1}\n")

import pytest

from mincut.errors import InputNotFound, MalformedInput
from mincut.graph import Graph
from mincut.instance_reader import read_col_instance, write_col_instance

INSTANCE = """c two triangles joined by one edge
c
p edge 6 7
e 1 2
e 2 3
e 1 3
e 4 5
e 5 6
e 4 6

e 3 4
"""


def _write(tmp_path, text, name="graph.col"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_reads_zero_indexed_edges(tmp_path):
    graph = read_col_instance(_write(tmp_path, INSTANCE))
    assert graph.n == 6
    assert graph.m == 7
    assert graph.edges.tolist()[0] == [0, 1]
    assert graph.edges.tolist()[-1] == [2, 3]


def test_edge_count_is_only_a_hint(tmp_path):
    graph = read_col_instance(_write(tmp_path, "p edge 3 10\ne 1 2\ne 2 3\n"))
    assert graph.m == 2


def test_missing_file(tmp_path):
    with pytest.raises(InputNotFound):
        read_col_instance(tmp_path / "missing.col")


def test_missing_file_is_a_file_not_found_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_col_instance(tmp_path / "missing.col")


@pytest.mark.parametrize("text, line_number", [
    ("p edge 3\n", 1),
    ("p col 3 2\n", 1),
    ("p edge three 2\n", 1),
    ("p edge 1 0\n", 1),
    ("p edge 3 2\ne 1\n", 2),
    ("p edge 3 2\ne 1 x\n", 2),
    ("p edge 3 2\ne 1 2\ne 0 2\n", 3),
    ("p edge 3 2\ne 1 4\n", 2),
    ("e 1 2\np edge 3 1\n", 1),
])
def test_malformed_lines(tmp_path, text, line_number):
    with pytest.raises(MalformedInput) as excinfo:
        read_col_instance(_write(tmp_path, text))
    assert excinfo.value.line_number == line_number
    assert f"line {line_number}" in str(excinfo.value)


def test_missing_problem_line(tmp_path):
    with pytest.raises(MalformedInput):
        read_col_instance(_write(tmp_path, "c nothing here\n"))


def test_write_then_read(tmp_path):
    graph = Graph(4, [(0, 1), (1, 2), (2, 3), (3, 0), (0, 1)])
    path = tmp_path / "out" / "graph.col"
    write_col_instance(graph, path, comment="square\nwith a double edge")

    lines = path.read_text().splitlines()
    assert lines[:3] == ["c square", "c with a double edge", "p edge 4 5"]

    back = read_col_instance(path)
    assert back.n == graph.n
    assert back.edges.tolist() == graph.edges.tolist()


def test_undecodable_line(tmp_path):
    path = tmp_path / "binary.col"
    path.write_bytes(b"p edge 2 1\ne 1 \xff\xfe\n")
    with pytest.raises(MalformedInput) as excinfo:
        read_col_instance(path)
    assert excinfo.value.line_number == 2


def test_utf8_comments_are_accepted(tmp_path):
    path = tmp_path / "graph.col"
    path.write_bytes("c Erdős–Rényi\np edge 2 1\ne 1 2\n".encode('utf-8'))
    assert read_col_instance(path).m == 1

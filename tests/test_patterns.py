import pytest

from algobox.patterns import hexagon


def test_size_two():
    assert hexagon(2) == " **\n****\n **"


def test_size_one():
    assert hexagon(1) == "*"


@pytest.mark.parametrize("n", [0, -3])
def test_non_positive_size_is_empty(n):
    assert hexagon(n) == ""


@pytest.mark.parametrize("n", [3, 4, 5])
def test_shape_invariants(n):
    lines = hexagon(n).split("\n")
    assert lines == lines[::-1]
    assert len(lines) == 2 * n - 1
    assert lines[0].strip() == "*" * n
    stars = [line.count("*") for line in lines[:n]]
    assert all(b - a == 2 for a, b in zip(stars, stars[1:]))
    assert lines[n - 1].startswith("*")


@pytest.mark.parametrize("n", [3, 6])
def test_lines_are_centred(n):
    for line in hexagon(n).split("\n"):
        indent = len(line) - len(line.lstrip(" "))
        assert set(line[indent:]) == {"*"}
        assert 2 * indent + line.count("*") == len(hexagon(n).split("\n")[n - 1])
"""
Tests for assembling pavement polygons.
"""

import pytest
from xp_apt.parsers.pavement import PavementAssembler
from xp_apt.parsers.rows import parse_line


def assemble(lines):
    """Run a header and node lines through an assembler and flush it."""
    assembler = PavementAssembler()
    assembler.start(parse_line("110 1 0.25 0.00 Main apron"))
    for line in lines:
        assembler.add_node(parse_line(line))
    return assembler.flush()


class TestPavementAssembler:
    """Test cases for the boundary and hole state machine."""

    def test_inactive_without_header(self):
        assembler = PavementAssembler()
        assert not assembler.active
        assert assembler.flush() is None

    def test_boundary_only(self):
        polygon = assemble(["111 0.0 0.0", "111 0.0 0.001", "113 0.001 0.001"])
        assert len(polygon.boundary) == 3
        assert polygon.holes == []

    def test_boundary_and_holes(self):
        polygon = assemble([
            "111 0.0 0.0", "111 0.0 0.01", "111 0.01 0.01", "113 0.01 0.0",
            "111 0.002 0.002", "111 0.002 0.003", "113 0.003 0.003",
            "111 0.005 0.005", "112 0.005 0.006 0.0055 0.0065", "114 0.006 0.006 0.0062 0.0062",
        ])
        assert len(polygon.boundary) == 4
        assert len(polygon.holes) == 2
        assert [len(hole) for hole in polygon.holes] == [3, 3]
        assert polygon.holes[1][1].has_control
        assert polygon.degenerate_holes() == []

    def test_degenerate_hole(self):
        """A closing node right after the boundary makes a one node hole."""
        polygon = assemble([
            "111 0.0 0.0", "111 0.0 0.01", "113 0.01 0.01",
            "113 0.005 0.005",
        ])
        assert len(polygon.holes) == 1
        assert polygon.degenerate_holes() == [0]

    def test_flush_resets(self):
        assembler = PavementAssembler()
        assembler.start(parse_line("110 2 0.25 0.00 Ramp"))
        assembler.add_node(parse_line("111 0.0 0.0"))
        assert assembler.flush() is not None
        assert not assembler.active
        assert assembler.polygon.is_empty()

    def test_header_without_nodes(self):
        assert assemble([]) is None

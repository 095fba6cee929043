"""
Tests for the tile model

Covers:
1. Grid rotate/flip laws and edge extraction
2. Orientation composition and numpy agreement
3. Tile parsing and malformed input

Usage:
    pytest tests/test_tiles.py
    python tests/test_tiles.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from monster_map.errors import MalformedInputError
from monster_map.tiles import Direction, Edge, Grid, Orientation, parse_tiles, load_tiles


SAMPLE_PATH = Path(__file__).parent / "data" / "sample_tiles.txt"


# Every cell distinct, so all 8 orientations differ
LETTERS = Grid.from_rows(["abc", "def", "ghi"])
WIDE = Grid.from_rows(["abcd", "efgh"])


def test_rotate_cw():
    """Left column read bottom-to-top becomes the top row."""
    print("\n" + "=" * 60)
    print("TEST: Grid.rotate_cw")
    print("=" * 60)

    assert LETTERS.rotate_cw().rows == ("gda", "heb", "ifc")

    rotated = WIDE.rotate_cw()
    assert rotated.rows == ("ea", "fb", "gc", "hd")
    assert (rotated.width, rotated.height) == (2, 4)


def test_rotate_four_times_is_identity():
    for grid in (LETTERS, WIDE, load_tiles(SAMPLE_PATH)[2311].grid):
        current = grid
        for _ in range(4):
            current = current.rotate_cw()
        assert current == grid


def test_flips_are_involutions():
    assert LETTERS.flip_vertical().rows == ("ghi", "def", "abc")
    assert LETTERS.flip_horizontal().rows == ("cba", "fed", "ihg")
    assert LETTERS.flip_vertical().flip_vertical() == LETTERS
    assert LETTERS.flip_horizontal().flip_horizontal() == LETTERS


def test_transforms_preserve_characters():
    grid = load_tiles(SAMPLE_PATH)[1951].grid
    for oriented in grid.orientations():
        assert (oriented.width, oriented.height) == (grid.width, grid.height)
        assert sorted("".join(oriented.rows)) == sorted("".join(grid.rows))


def test_basic_edges_read_clockwise():
    print("\n" + "=" * 60)
    print("TEST: Grid.basic_edges")
    print("=" * 60)

    edges = LETTERS.basic_edges()
    print(f"  Edges: {[(e.side, e.direction.name) for e in edges]}")

    assert edges == [
        Edge("abc", Direction.UP),
        Edge("ihg", Direction.DOWN),
        Edge("gda", Direction.LEFT),
        Edge("cfi", Direction.RIGHT),
    ]
    assert LETTERS.edge(Direction.RIGHT).side == "cfi"


def test_edges_follow_rotation():
    """Rotating clockwise moves each edge string one direction clockwise."""
    before = {edge.direction: edge.side for edge in LETTERS.basic_edges()}
    after = {edge.direction: edge.side for edge in LETTERS.rotate_cw().basic_edges()}
    for direction, side in before.items():
        assert after[direction.rotate_cw()] == side


def test_permuted_edges():
    edges = LETTERS.permuted_edges()
    assert len(edges) == 8
    for plain, reversed_edge in zip(edges[::2], edges[1::2]):
        assert not plain.flipped
        assert reversed_edge.flipped
        assert reversed_edge.side == plain.side[::-1]
        assert reversed_edge.direction == plain.direction


def test_interior():
    grid = Grid.from_rows(["abcd", "efgh", "ijkl", "mnop"])
    assert grid.interior().rows == ("fg", "jk")


def test_direction_turns():
    assert Direction.UP.rotate_cw() == Direction.RIGHT
    assert Direction.LEFT.rotate_cw() == Direction.UP
    assert Direction.DOWN.turns_to(Direction.LEFT) == 1
    assert Direction.RIGHT.turns_to(Direction.LEFT) == 2
    assert Direction.LEFT.turns_to(Direction.LEFT) == 0
    assert Direction.UP.opposite == Direction.DOWN
    assert (Direction.UP.dx, Direction.UP.dy) == (0, -1)


def test_orientation_all_matches_grid_orientations():
    print("\n" + "=" * 60)
    print("TEST: Orientation group")
    print("=" * 60)

    by_orientation = [orientation.apply(LETTERS) for orientation in Orientation.all()]
    assert by_orientation == list(LETTERS.orientations())
    assert len(set(by_orientation)) == 8


def test_orientation_composition():
    """Composing an Orientation equals applying the grid operation afterwards."""
    for orientation in Orientation.all():
        oriented = orientation.apply(LETTERS)
        assert orientation.rotate_cw().apply(LETTERS) == oriented.rotate_cw()
        assert orientation.rotate_cw(3).apply(LETTERS) == oriented.rotate_cw().rotate_cw().rotate_cw()
        assert orientation.flip_horizontal().apply(LETTERS) == oriented.flip_horizontal()
        assert orientation.flip_vertical().apply(LETTERS) == oriented.flip_vertical()


def test_orientation_normalizes_rotations():
    assert Orientation(5, False) == Orientation(1, False)
    assert Orientation(-1, True) == Orientation(3, True)
    assert Orientation.identity().apply(LETTERS) == LETTERS


def test_orientation_apply_array_agrees():
    array = LETTERS.to_array()
    for orientation in Orientation.all():
        assert Grid.from_array(orientation.apply_array(array)) == orientation.apply(LETTERS)

    wide = WIDE.to_array()
    for orientation in Orientation.all():
        assert Grid.from_array(orientation.apply_array(wide)) == orientation.apply(WIDE)


def test_parse_sample():
    print("\n" + "=" * 60)
    print("TEST: parse_tiles (sample)")
    print("=" * 60)

    tiles = load_tiles(SAMPLE_PATH)
    print(f"  Parsed {len(tiles)} tiles: {list(tiles)}")

    assert list(tiles) == [2311, 1951, 1171, 1427, 1489, 2473, 2971, 2729, 3079]
    assert all(tile.size == 10 for tile in tiles.values())
    assert tiles[2311].grid.rows[0] == "..##.#..#."
    assert tiles[3079].grid.rows[-1] == "..#.###..."
    assert len(tiles[2311].edge_strings()) == 8


def test_parse_ignores_indentation():
    text = """
        Tile 7:
          #.
          .#

        Tile 8:
          ##
          ..
    """
    tiles = parse_tiles(text)
    assert list(tiles) == [7, 8]
    assert tiles[7].grid.rows == ("#.", ".#")


@pytest.mark.parametrize("text", [
    "",
    "#.\n.#",
    "Tile x:\n#.\n.#",
    "Tile 1\n#.\n.#",
    "Tile 1:",
    "Tile 1:\n#.\n.#\n\nTile 1:\n#.\n.#",
    "Tile 1:\n#.\n.##",
    "Tile 1:\n#..\n.#.",
    "Tile 1:\n#a\n.#",
    "Tile 1:\n#.\n.#\n\nTile 2:\n#..\n.#.\n...",
])
def test_parse_malformed(text):
    with pytest.raises(MalformedInputError):
        parse_tiles(text)


def main():
    """Run all tests."""
    print("\n" + "#" * 60)
    print("# TILE MODEL TESTS")
    print("#" * 60)

    tests = [
        test_rotate_cw,
        test_rotate_four_times_is_identity,
        test_flips_are_involutions,
        test_transforms_preserve_characters,
        test_basic_edges_read_clockwise,
        test_edges_follow_rotation,
        test_permuted_edges,
        test_interior,
        test_direction_turns,
        test_orientation_all_matches_grid_orientations,
        test_orientation_composition,
        test_orientation_normalizes_rotations,
        test_orientation_apply_array_agrees,
        test_parse_sample,
        test_parse_ignores_indentation,
    ]

    failed = 0
    for test in tests:
        try:
            test()
            print(f"  {test.__name__}: [PASS]")
        except AssertionError as e:
            failed += 1
            print(f"  {test.__name__}: [FAIL] {e}")

    print()
    print("All tests PASSED!" if not failed else f"{failed} tests FAILED!")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

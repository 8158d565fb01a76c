import pytest

from bojsolutions.grids import count_reachable_people, distance_map, steal_documents


def _check_bfs_distances(grid, result):
    height, width = len(grid), len(grid[0])
    for r in range(height):
        for c in range(width):
            if grid[r][c] != 1 or result[r][c] == -1:
                continue
            around = [
                result[nr][nc]
                for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1))
                if 0 <= nr < height and 0 <= nc < width and grid[nr][nc] != 0
                and result[nr][nc] != -1
            ]
            assert min(around) == result[r][c] - 1


def test_open_grid_distances_are_manhattan():
    grid = [[1] * 4 for _ in range(3)]
    grid[1][2] = 2
    result = distance_map(grid)
    for r in range(3):
        for c in range(4):
            assert result[r][c] == abs(r - 1) + abs(c - 2)


def test_walls_stay_zero_and_distances_are_consistent():
    grid = [
        [2, 1, 1, 0],
        [0, 0, 1, 0],
        [1, 1, 1, 1],
        [1, 0, 0, 1],
    ]
    result = distance_map(grid)
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == 0:
                assert result[r][c] == 0
            if cell == 1:
                assert result[r][c] >= 1
    _check_bfs_distances(grid, result)


def test_unreachable_cell_is_minus_one():
    assert distance_map([[2, 0, 1]]) == [[0, 0, -1]]


def test_distance_map_needs_target():
    with pytest.raises(ValueError):
        distance_map([[1, 1], [1, 0]])


def test_distance_map_rejects_ragged_grid():
    with pytest.raises(ValueError):
        distance_map([[2, 1], [1]])


def test_distance_map_rejects_unknown_cell():
    with pytest.raises(ValueError):
        distance_map([[2, 7]])


def test_everyone_reachable_in_open_campus():
    grid = ["OPO", "PIP", "OPO"]
    assert count_reachable_people(grid) == sum(row.count("P") for row in grid)


def test_wall_blocks_people():
    assert count_reachable_people(["IXP"]) == 0


def test_walls_reduce_reachable_people():
    walled = ["OPXP", "IOXP"]
    opened = ["OPOP", "IOOP"]
    assert count_reachable_people(walled) < count_reachable_people(opened)
    assert count_reachable_people(opened) == sum(row.count("P") for row in opened)


def test_count_people_needs_start():
    with pytest.raises(ValueError):
        count_reachable_people(["OPO"])


def test_count_people_rejects_ragged_grid():
    with pytest.raises(ValueError):
        count_reachable_people(["IO", "P"])


SAMPLE_BUILDING = [
    "*****************",
    ".............**$*",
    "*B*A*P*C**X*Y*.X.",
    "*y*x*a*p**$*$**$*",
    "*****************",
]


def test_sample_building():
    assert steal_documents(SAMPLE_BUILDING, "cz") == 3


def test_starting_key_opens_door():
    grid = ["*A*", "*$*", "***"]
    assert steal_documents(grid, "") < steal_documents(grid, "a")
    assert steal_documents(grid, "a") == sum(row.count("$") for row in grid)


def test_zero_means_no_keys():
    assert steal_documents(SAMPLE_BUILDING, "0") == steal_documents(SAMPLE_BUILDING, "")


def test_open_border_documents_are_all_taken():
    grid = ["$$$", "$*$", "$$$"]
    assert steal_documents(grid, "") == sum(row.count("$") for row in grid)


def test_invalid_key_rejected():
    with pytest.raises(ValueError):
        steal_documents(["$"], "A")


def test_steal_rejects_ragged_grid():
    with pytest.raises(ValueError):
        steal_documents(["$$", "$"], "")
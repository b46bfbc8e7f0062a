import math

import pytest

from aocsolver.y2022_day08 import parse_forest

EXAMPLE = "\n".join(("30373", "25512", "65332", "33549", "35390")) + "\n"


@pytest.fixture
def forest():
    return parse_forest(EXAMPLE)


def test_example_answers(forest):
    assert (forest.visible_count(), forest.best_scenic_score()) == (21, 8)


def test_viewing_distances_example_tree(forest):
    assert forest.viewing_distances(2, 3) == (2, 1, 2, 2)


def test_scenic_score_is_product_of_distances(forest):
    scores = {
        (x, y): forest.scenic_score(x, y)
        for y in range(forest.rows)
        for x in range(forest.columns)
    }
    assert all(
        score == math.prod(forest.viewing_distances(x, y))
        for (x, y), score in scores.items()
    )


@pytest.mark.parametrize("position", [(0, 0), (4, 2)])
def test_edge_trees_score_zero(forest, position):
    assert forest.scenic_score(*position) == 0


def test_single_row_is_fully_visible():
    assert parse_forest("12321\n").visible_count() == 5


def test_visible_count_between_perimeter_and_total(forest):
    perimeter = 2 * forest.rows + 2 * forest.columns - 4
    assert perimeter <= forest.visible_count() <= forest.rows * forest.columns


def test_parse_shape(forest):
    assert forest.heights[0] == (3, 0, 3, 7, 3)
    assert (forest.rows, forest.columns) == (5, 5)


@pytest.mark.parametrize("text", ["12a\n345\n", "123\n45\n", "\n"])
def test_invalid_input_raises(text):
    with pytest.raises(ValueError):
        parse_forest(text)


def test_position_outside_raises(forest):
    with pytest.raises(IndexError):
        forest.viewing_distances(5, 0)
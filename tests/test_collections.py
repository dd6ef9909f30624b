import pytest

from rustlings.exercises.collections import (
    Fruit,
    array_and_vec,
    build_scores_table,
    fill_fruit_basket,
    fill_vec,
    fruit_basket,
    vec_loop,
    vec_map,
)

RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def _given_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_at_least_three_types_of_fruits():
    assert len(fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(fruit_basket().values()) >= 5


def test_given_fruits_are_not_modified():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert sum(basket.values()) > 11


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    team = build_scores_table(RESULTS)["Spain"]
    assert team.goals_scored == 0
    assert team.goals_conceded == 2


def test_team_name_is_stored():
    assert build_scores_table(RESULTS)["Italy"].name == "Italy"


def test_bad_goal_count_rejected():
    with pytest.raises(ValueError):
        build_scores_table("England,France,four,2\n")


def test_goal_overflow_rejected():
    with pytest.raises(OverflowError):
        build_scores_table("A,B,200,0\nA,B,100,0\n")


def test_array_and_vec_similarity():
    a, v = array_and_vec()
    assert list(a) == v
    assert a == (10, 20, 30, 40)


def test_vec_loop():
    values = [2, 4, 6, 8, 10]
    answer = vec_loop(values)
    assert answer == [4, 8, 12, 16, 20]
    assert values == [4, 8, 12, 16, 20]


def test_vec_map():
    values = [2, 4, 6, 8, 10]
    assert vec_map(values) == [4, 8, 12, 16, 20]
    assert values == [2, 4, 6, 8, 10]


def test_fill_vec_from_empty():
    filled = fill_vec([])
    assert filled == [22, 44, 66]
    filled.append(88)
    assert filled == [22, 44, 66, 88]


def test_fill_vec_keeps_existing_values():
    original = [1]
    assert fill_vec(original) == [1, 22, 44, 66]
    assert original == [1]
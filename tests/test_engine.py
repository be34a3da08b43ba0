import numpy as np
import pytest
from distle.engine import Op, build_table, edit_distance, reconstruct, transformation_list, replay
from distle.exceptions import TableInvariantError

R, T, I, D = Op.REPLACE, Op.TRANSPOSE, Op.INSERT, Op.DELETE

PAIRS = [
    ("cat", "act"),
    ("kitten", "sitting"),
    ("abc", "bcd"),
    ("", "abc"),
    ("abc", ""),
    ("ab", "ba"),
    ("a", "b"),
    ("ca", "abc"),
    ("distle", "listen"),
    ("saturday", "sunday"),
    ("transposition", "transpositoin"),
    ("horse", "ros"),
]


# --- distance golden tests ---
@pytest.mark.parametrize("s0,s1,expected", [
    ("", "", 0),
    ("abc", "abc", 0),
    ("", "abc", 3),
    ("abc", "", 3),
    ("cat", "act", 1),
    ("ab", "ba", 1),
    ("abcd", "abdc", 1),
    ("kitten", "sitting", 3),
    ("horse", "ros", 3),
    ("intention", "execution", 5),
    ("ca", "abc", 3),
])
def test_edit_distance_golden(s0, s1, expected):
    assert edit_distance(s0, s1) == expected


# --- canonical sequence golden tests ---
@pytest.mark.parametrize("s0,s1,expected", [
    ("cat", "act", [T]),
    ("ab", "ba", [T]),
    ("kitten", "sitting", [I, R, R]),
    ("cat", "cot", [R]),
    ("cat", "cart", [I]),
    ("abc", "bcd", [I, D]),
    ("", "ab", [I, I]),
    ("ab", "", [D, D]),
    ("ca", "abc", [R, R, I]),
    ("same", "same", []),
])
def test_transformation_list_golden(s0, s1, expected):
    assert transformation_list(s0, s1) == expected

def test_op_tags_match_game_letters():
    assert [op.value for op in (R, T, I, D)] == ["R", "T", "I", "D"]
    assert Op("T") is Op.TRANSPOSE
    assert R == "R"

def test_table_base_row_and_column():
    table = build_table("abc", "de")
    assert table.shape == (4, 3)
    assert list(table[0, :]) == [0, 1, 2]
    assert list(table[:, 0]) == [0, 1, 2, 3]

def test_table_is_read_only():
    table = build_table("cat", "act")
    with pytest.raises(ValueError):
        table[0, 0] = 9

def test_reconstruct_rejects_inconsistent_table():
    bogus = np.array([[0, 1], [1, 5]])
    with pytest.raises(TableInvariantError):
        reconstruct("a", "b", bogus)

def test_reconstruct_rejects_table_of_wrong_shape():
    with pytest.raises(TableInvariantError):
        reconstruct("ab", "ba", build_table("a", "b"))
    with pytest.raises(TableInvariantError):
        reconstruct("a", "b", build_table("ab", "ba"))


# --- properties over a spread of pairs ---
@pytest.mark.parametrize("s", ["", "a", "cat", "distle", "aaaa"])
def test_identity_is_free(s):
    assert edit_distance(s, s) == 0
    assert reconstruct(s, s, build_table(s, s)) == []

@pytest.mark.parametrize("s0,s1", PAIRS)
def test_distance_is_symmetric(s0, s1):
    assert edit_distance(s0, s1) == edit_distance(s1, s0)

@pytest.mark.parametrize("s0,s1", PAIRS)
def test_sequence_length_equals_distance(s0, s1):
    table = build_table(s0, s1)
    ops = reconstruct(s0, s1, table)
    assert len(ops) == edit_distance(s0, s1) == int(table[len(s0), len(s1)])

@pytest.mark.parametrize("s0,s1", PAIRS)
def test_replay_reaches_target(s0, s1):
    assert replay(s0, s1, transformation_list(s0, s1)) == s1

@pytest.mark.parametrize("s0,s1", PAIRS)
def test_reconstruct_is_deterministic(s0, s1):
    table = build_table(s0, s1)
    assert reconstruct(s0, s1, table) == reconstruct(s0, s1, table)
    assert transformation_list(s0, s1) == transformation_list(s0, s1)

def test_replay_accepts_tags_and_rejects_overruns():
    assert replay("cat", "act", ["T"]) == "act"
    with pytest.raises(ValueError):
        replay("ab", "ab", ["D", "D", "D"])
    with pytest.raises(ValueError):
        replay("abc", "xyz", ["R"])

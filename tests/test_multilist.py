import pytest

from serialist_objects.generators import GeneratorError
from serialist_objects.multilist import IndexOutOfBounds, Multilist, MultilistError


def test_object_is_constructible():
    m = Multilist()
    assert len(m) == 0
    assert m.format() == ["null"]


def test_initial_nested_list():
    m = Multilist([[1, 2], [3]])
    assert list(m) == [[1.0, 2.0], [3.0]]


def test_initial_generator_keyword():
    m = Multilist(["range", 3])
    assert list(m) == [[0.0], [1.0], [2.0]]


def test_initial_null_is_empty():
    assert len(Multilist("null")) == 0


def test_initial_invalid_raises():
    with pytest.raises(MultilistError):
        Multilist(["bogus"])


def test_reset_returns_formatted_state():
    m = Multilist()
    assert m.reset([[1, 2], [3]]) == ["[", 1.0, 2.0, "]", "[", 3.0, "]"]
    assert m.reset([4, 5]) == [4.0, 5.0]
    assert list(m) == [[4.0], [5.0]]


def test_reset_accepts_bracketed_atoms():
    m = Multilist()
    m.reset(["[", 1, 2, "]", "null", 3])
    assert list(m) == [[1.0, 2.0], [], [3.0]]


def test_format_round_trip():
    m = Multilist([[1, 2], [], [3]])
    other = Multilist()
    other.reset(m.format())
    assert list(other) == list(m)


def test_set_null_gives_empty_like():
    m = Multilist([[1]])
    assert m.set(None) is None
    assert list(m) == [[]]
    assert m.format() == ["null"]


def test_unbalanced_brackets_raise():
    m = Multilist()
    with pytest.raises(MultilistError):
        m.reset(["[", 1, 2])
    with pytest.raises(MultilistError):
        m.reset([1, "]"])


def test_singular_and_set_singular():
    m = Multilist()
    assert m.singular([60, 64, 67]) == [60.0, 64.0, 67.0] or list(m) == [[60.0, 64.0, 67.0]]
    assert list(m) == [[60.0, 64.0, 67.0]]
    m.set_singular([1])
    assert list(m) == [[1.0]]


def test_append():
    m = Multilist()
    m.append([1, 2])
    m.append([3])
    assert list(m) == [[1.0, 2.0], [3.0]]


def test_append_rejects_symbols():
    with pytest.raises(MultilistError):
        Multilist().append(["x"])


def test_extend_with_keyword_and_container():
    m = Multilist([[9]])
    m.extend(["range", 2])
    m.extend([[7, 8]])
    assert list(m) == [[9.0], [0.0], [1.0], [7.0, 8.0]]


def test_extend_with_null_adds_nothing():
    m = Multilist([[1]])
    m.extend(["null"])
    assert list(m) == [[1.0]]


def test_extend_without_arguments_raises():
    with pytest.raises(MultilistError):
        Multilist().extend([])


def test_insert_positions():
    m = Multilist([[1], [2]])
    m.insert(0, [0])
    m.insert(-1, [3])
    m.insert(1, [5])
    assert list(m) == [[0.0], [5.0], [1.0], [2.0], [3.0]]


def test_insert_pads_with_empty_lists():
    m = Multilist()
    m.insert(3, [1])
    assert list(m) == [[], [], [], [1.0]]


def test_insert_too_large_raises():
    m = Multilist()
    with pytest.raises(MultilistError, match="index too large"):
        m.insert(2000, [1])
    assert len(m) == 0


def test_insert_negative_out_of_bounds():
    m = Multilist([[1]])
    with pytest.raises(IndexOutOfBounds):
        m.insert(-3, [2])
    assert list(m) == [[1.0]]


def test_replace():
    m = Multilist([[1], [2]])
    m.replace(-1, [7, 8])
    assert list(m) == [[1.0], [7.0, 8.0]]
    with pytest.raises(IndexOutOfBounds):
        m.replace(2, [0])


def test_replace_is_not_recorded_for_undo():
    m = Multilist([[1]])
    m.replace(0, [5])
    assert m.undo() is True
    assert list(m) == []


def test_remove_multiple_indices():
    m = Multilist([[0], [1], [2], [3]])
    m.remove(0, -1)
    assert list(m) == [[1.0], [2.0]]


def test_remove_aborts_on_invalid_index():
    m = Multilist([[0], [1]])
    with pytest.raises(IndexOutOfBounds):
        m.remove(0, 5)
    assert list(m) == [[0.0], [1.0]]


def test_remove_without_arguments_raises():
    with pytest.raises(MultilistError):
        Multilist([[1]]).remove()


def test_undo_sequence():
    m = Multilist()
    m.append([1, 2])
    m.append([3])
    assert m.undo() is True
    assert list(m) == [[1.0, 2.0]]
    assert m.undo() is True
    assert list(m) == []
    assert m.undo() is False


def test_history_is_bounded():
    m = Multilist(max_history=2)
    m.append([1])
    m.append([2])
    m.append([3])
    assert m.undo() is True
    assert list(m) == [[1.0], [2.0]]
    assert m.undo() is True
    assert list(m) == [[1.0]]
    assert m.undo() is False
    assert list(m) == [[1.0]]


def test_clear_and_undo():
    m = Multilist([[1], [2]])
    assert m.clear() == ["null"]
    assert len(m) == 0
    m.undo()
    assert list(m) == [[1.0], [2.0]]


def test_generate_binarypattern():
    m = Multilist()
    m.generate("binarypattern", 16, 3, 2, 1, 0)
    assert [v[0] for v in m] == [3, 0, 0, 0, 1, 0, 0, 0, 2, 0, 0, 0, 1, 0, 0, 0]


def test_generate_unknown_keyword_raises():
    with pytest.raises(GeneratorError):
        Multilist().generate("nonsense", 1)


def test_bounded_index():
    m = Multilist([[1], [2], [3]])
    assert m.bounded_index(-1) == 2
    assert m.bounded_index(3, after=True) == 3
    assert m.bounded_index(-1, after=True) == 3
    with pytest.raises(IndexOutOfBounds):
        m.bounded_index(3)


def test_iteration_returns_copies():
    m = Multilist([[1]])
    for voice in m:
        voice.append(2.0)
    assert list(m) == [[1.0]]
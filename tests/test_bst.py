import io

import pytest

from dsakit.bst import BinarySearchTree, main

KEYS = [5, 1, 3, 4, 2, 7]


def _tree(keys=KEYS):
    tree = BinarySearchTree()
    for key in keys:
        tree.insert(key)
    return tree


def test_inorder_is_sorted_and_len():
    tree = _tree()
    assert tree.inorder() == sorted(KEYS)
    assert len(tree) == len(KEYS)


def test_preorder_and_postorder():
    tree = _tree()
    assert tree.preorder() == [5, 1, 3, 2, 4, 7]
    assert tree.postorder() == [2, 4, 3, 1, 7, 5]


def test_traversals_share_root_position():
    tree = _tree()
    assert tree.preorder()[0] == KEYS[0]
    assert tree.postorder()[-1] == KEYS[0]


def test_min_and_max():
    tree = _tree()
    assert tree.minimum() == min(KEYS)
    assert tree.maximum() == max(KEYS)


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.inorder() == []
    assert len(tree) == 0
    with pytest.raises(ValueError):
        tree.minimum()
    with pytest.raises(ValueError):
        tree.maximum()


def test_search_and_contains():
    tree = _tree()
    assert tree.search(4) == 4
    assert tree.search(6) is None
    assert 3 in tree
    assert 6 not in tree


def test_successor_and_predecessor_follow_order():
    tree = _tree()
    ordered = sorted(KEYS)
    for smaller, larger in zip(ordered, ordered[1:]):
        assert tree.successor(smaller) == larger
        assert tree.predecessor(larger) == smaller
    assert tree.successor(ordered[-1]) is None
    assert tree.predecessor(ordered[0]) is None


def test_successor_of_missing_key():
    with pytest.raises(KeyError):
        _tree().successor(100)
    with pytest.raises(KeyError):
        _tree().predecessor(100)


@pytest.mark.parametrize("key", KEYS)
def test_delete_each_key(key):
    tree = _tree()
    tree.delete(key)
    expected = sorted(KEYS)
    expected.remove(key)
    assert tree.inorder() == expected
    assert len(tree) == len(KEYS) - 1
    assert key not in tree


def test_delete_missing_is_ignored():
    tree = _tree()
    tree.delete(99)
    assert tree.inorder() == sorted(KEYS)


def test_delete_everything():
    tree = _tree()
    for key in KEYS:
        tree.delete(key)
    assert tree.inorder() == []
    assert len(tree) == 0


def test_duplicates_kept_and_removed_one_at_a_time():
    tree = _tree([5, 5, 3])
    assert tree.inorder() == [3, 5, 5]
    tree.delete(5)
    assert tree.inorder() == [3, 5]


def test_main_menu(monkeypatch, capsys):
    commands = "1\n5\n1\n3\n1\n8\n3\n7\n8\n5\n5\n2\n5\n3\n9\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(commands))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "3 5 8" in out
    assert "Maximum node: 8" in out
    assert "Minimum node: 3" in out
    assert "Successor: 8" in out
    assert "3 8" in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n4\n6\n4\n"))
    assert main([]) == 0
    assert "Searched Element: 4" in capsys.readouterr().out
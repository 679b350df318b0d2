import numpy as np

import tree_demo
from binary_search_tree import Tree


def test_random_values_stay_in_range():
    rng = np.random.default_rng(7)
    values = tree_demo.random_values(rng, 50, (1, 3))
    assert len(values) == 50
    assert set(values) <= {1, 2, 3}
    assert all(type(value) is int for value in values)


def test_handle_exceptions_reports_and_continues(capsys):
    assert tree_demo.show_depth(Tree([1, 2, 3]), 42) is None
    out = capsys.readouterr().out
    assert 'Lookup error in show_depth' in out
    assert 'Continuing...' in out


def test_show_depth_returns_depth(capsys):
    assert tree_demo.show_depth(Tree([1, 2, 3]), 3) == 1
    assert 'Depth of 3: 1' in capsys.readouterr().out


def test_run_demo_ends_balanced(capsys):
    tree = tree_demo.run_demo(size=15, extra_inserts=10, seed=123)
    out = capsys.readouterr().out

    assert tree.is_balanced()
    values = tree.inorder()
    assert values == sorted(set(values))
    assert sum(1 for value in values if value >= 100) >= 1
    assert 'After rebalancing' in out
    assert out.count('Inorder: ') == 2
    assert 'Continuing...' in out


def test_run_demo_is_repeatable_with_seed(capsys):
    first = tree_demo.run_demo(seed=5).level_order()
    second = tree_demo.run_demo(seed=5).level_order()
    capsys.readouterr()
    assert first == second

import functools
import numpy as np
from binary_search_tree import Tree

INITIAL_SIZE = 15
INITIAL_RANGE = (1, 100)
EXTRA_INSERTS = 10
EXTRA_RANGE = (100, 500)
MISSING_VALUE = 0
SEED = None

# Report lookup failures raised by the tree and keep the demo going
def handle_exceptions(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except IndexError as index_err:
            print(f"Lookup error in {func.__name__}: {index_err}")
            print("Continuing...")
    return wrapper

def random_values(rng, size, value_range):
    low, high = value_range
    # Both ends of the range are included
    return rng.integers(low, high + 1, size=size).tolist()

@handle_exceptions
def show_depth(tree, value):
    depth = tree.depth(value)
    print(f'Depth of {value}: {depth}')
    return depth

def show_traversals(tree):
    print(f'Level Order: {tree.level_order()}')
    print(f'Preorder: {tree.preorder()}')
    print(f'Inorder: {tree.inorder()}')
    print(f'Posorder: {tree.posorder()}')

def run_demo(size=INITIAL_SIZE, initial_range=INITIAL_RANGE, extra_inserts=EXTRA_INSERTS,
             extra_range=EXTRA_RANGE, seed=SEED):
    rng = np.random.default_rng(seed)

    tree = Tree(random_values(rng, size, initial_range))
    print(f'Balanced tree with elements between {initial_range[0]} and {initial_range[1]}')
    print(tree.is_balanced())
    show_traversals(tree)
    tree.pretty_print()

    for value in random_values(rng, extra_inserts, extra_range):
        tree.insert(value)

    print(f'After adding {extra_inserts} elements between {extra_range[0]} and {extra_range[1]}')
    print(tree.is_balanced())
    tree.pretty_print()

    tree.rebalance()
    print('After rebalancing')
    print(tree.is_balanced())
    tree.pretty_print()
    show_traversals(tree)

    show_depth(tree, MISSING_VALUE)

    return tree

def main():
    run_demo()


if __name__ == '__main__':
    main()

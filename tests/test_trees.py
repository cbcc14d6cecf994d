from algokit.trees import TreeNode, sum_of_left_leaves, tree_from_level_order


def test_source_example_with_sentinel():
    root = tree_from_level_order([3, 9, 20, -1001, -1001, 15, 7], null=-1001)
    assert sum_of_left_leaves(root) == 24


def test_build_layout():
    root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
    assert root.val == 3
    assert root.left.val == 9
    assert root.left.left is None and root.left.right is None
    assert root.right.left.val == 15
    assert root.right.right.val == 7


def test_empty_and_null_root():
    assert tree_from_level_order([]) is None
    assert tree_from_level_order([None, 1, 2]) is None
    assert sum_of_left_leaves(None) == 0


def test_root_alone_is_not_a_left_leaf():
    assert sum_of_left_leaves(TreeNode(5)) == 0


def test_single_left_leaf():
    root = tree_from_level_order([1, 2])
    assert sum_of_left_leaves(root) == 2


def test_right_leaf_not_counted():
    root = tree_from_level_order([1, None, 3])
    assert root.right.val == 3
    assert sum_of_left_leaves(root) == 0


def test_left_child_with_children_is_not_leaf():
    root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    assert sum_of_left_leaves(root) == 4
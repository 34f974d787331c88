import pytest

from algobox.trees import (
    TreeNode,
    build_tree,
    inorder,
    is_valid_bst,
    kth_smallest,
    level_order_bottom,
    preorder,
    search_bst,
)

BST_LEVELS = [5, 3, 6, 2, 4, None, None, 1]


def test_build_tree_empty():
    assert build_tree([]) is None
    assert build_tree([None]) is None


def test_build_tree_shape():
    root = build_tree([1, None, 2, 3])
    assert root.val == 1
    assert root.left is None
    assert root.right.val == 2
    assert root.right.left.val == 3
    assert root.right.right is None


def test_inorder_of_bst_is_sorted():
    values = [v for v in BST_LEVELS if v is not None]
    assert inorder(build_tree(BST_LEVELS)) == sorted(values)


def test_inorder_and_preorder_of_empty_tree():
    assert inorder(None) == []
    assert preorder(None) == []


def test_preorder_worked_example():
    assert preorder(build_tree([1, None, 2, 3])) == [1, 2, 3]


def test_preorder_invariants():
    root = build_tree(BST_LEVELS)
    result = preorder(root)
    assert result[0] == root.val
    assert result[1] == root.left.val
    assert sorted(result) == inorder(root)


def test_level_order_bottom_worked_example():
    root = build_tree([3, 9, 20, None, None, 15, 7])
    assert level_order_bottom(root) == [[15, 7], [9, 20], [3]]


def test_level_order_bottom_invariants():
    root = build_tree(BST_LEVELS)
    levels = level_order_bottom(root)
    assert levels[-1] == [root.val]
    assert levels[-2] == [root.left.val, root.right.val]
    assert sorted(v for level in levels for v in level) == inorder(root)


def test_level_order_bottom_empty():
    assert level_order_bottom(None) == []


@pytest.mark.parametrize("k", range(1, 7))
def test_kth_smallest(k):
    root = build_tree(BST_LEVELS)
    assert kth_smallest(root, k) == sorted(v for v in BST_LEVELS if v is not None)[k - 1]


@pytest.mark.parametrize("k", [0, 7])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest(build_tree(BST_LEVELS), k)


@pytest.mark.parametrize("value", [1, 2, 3, 4, 5, 6])
def test_search_bst_finds_node(value):
    node = search_bst(build_tree(BST_LEVELS), value)
    assert node.val == value


def test_search_bst_returns_subtree():
    root = build_tree([4, 2, 7, 1, 3])
    node = search_bst(root, 2)
    assert node is root.left
    assert inorder(node) == [1, 2, 3]


def test_search_bst_missing():
    assert search_bst(build_tree([4, 2, 7, 1, 3]), 5) is None
    assert search_bst(None, 1) is None


def test_valid_bst():
    assert is_valid_bst(build_tree(BST_LEVELS)) is True
    assert is_valid_bst(build_tree([2, 1, 3])) is True
    assert is_valid_bst(None) is True


def test_invalid_bst():
    assert is_valid_bst(build_tree([5, 1, 4, None, None, 3, 6])) is False


def test_duplicates_make_bst_invalid():
    assert is_valid_bst(TreeNode(2, TreeNode(2))) is False
    assert is_valid_bst(TreeNode(2, None, TreeNode(2))) is False
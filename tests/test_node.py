import pytest

from bintree.node import Node


@pytest.fixture
def basic_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


@pytest.fixture
def full_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(56, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


@pytest.fixture
def family_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def test_new_node_links():
    parent = Node(98)
    child = Node(12, parent)
    assert child.value == 12
    assert child.parent is parent
    assert child.left is None and child.right is None
    assert parent.left is None


def test_insert_left_pushes_existing_child_down():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.right.insert_left(128)
    new = root.insert_left(54)
    assert root.left is new
    assert new.parent is root
    assert new.left.value == 12
    assert new.left.parent is new
    assert root.right.left.value == 128
    assert list(root.inorder()) == [12, 54, 98, 128, 402]


def test_insert_right_pushes_existing_child_down(basic_tree):
    root = basic_tree
    assert root.right.value == 128
    assert root.right.right.value == 402
    assert root.right.right.parent is root.right
    assert root.left.right.value == 54
    assert list(root.preorder()) == [98, 12, 54, 128, 402]


def test_traversals(full_tree):
    assert list(full_tree.preorder()) == [98, 12, 6, 56, 402, 256, 512]
    assert list(full_tree.inorder()) == [6, 12, 56, 98, 256, 402, 512]
    assert list(full_tree.postorder()) == [6, 56, 12, 256, 512, 402, 98]


def test_is_leaf(basic_tree):
    assert basic_tree.is_leaf() is False
    assert basic_tree.right.is_leaf() is False
    assert basic_tree.right.right.is_leaf() is True


def test_is_root(basic_tree):
    assert basic_tree.is_root() is True
    assert basic_tree.right.is_root() is False
    assert basic_tree.right.right.is_root() is False


def test_height_and_depth(basic_tree):
    deepest = basic_tree.left.right
    assert basic_tree.height() == deepest.depth()
    assert deepest.height() == basic_tree.depth()
    assert basic_tree.right.height() == basic_tree.right.depth()
    assert basic_tree.right.right.depth() == basic_tree.height()


def test_size_matches_traversal(basic_tree):
    assert basic_tree.size() == len(list(basic_tree.preorder()))
    assert basic_tree.right.size() == len(list(basic_tree.right.inorder()))
    assert basic_tree.left.right.size() == 1


def test_leaves_and_internal_nodes(basic_tree):
    assert basic_tree.leaves() + basic_tree.internal_nodes() == basic_tree.size()
    assert basic_tree.left.right.leaves() == 1
    assert basic_tree.left.right.internal_nodes() == 0
    assert basic_tree.right.leaves() == basic_tree.right.internal_nodes()


def test_balance():
    root = Node(1)
    assert root.balance() == 0
    root.insert_left(2)
    assert root.balance() == 1
    other = Node(3)
    other.insert_right(4)
    assert other.balance() == -1


def test_balance_of_symmetric_tree_is_zero(full_tree):
    assert full_tree.balance() == 0
    assert full_tree.left.balance() == full_tree.right.balance()


def test_is_full(basic_tree):
    basic_tree.left.left = Node(10, basic_tree.left)
    assert basic_tree.is_full() is False
    assert basic_tree.left.is_full() is True
    assert basic_tree.right.is_full() is False


def test_is_perfect_true_cases(full_tree):
    assert full_tree.is_perfect() is True
    assert Node(5).is_perfect() is True
    full_tree.left.left.insert_left(1)
    assert full_tree.is_perfect() is False


def test_sibling(family_tree):
    root = family_tree
    assert root.left.sibling() is root.right
    assert root.right.left.sibling() is root.right.right
    assert root.left.right.sibling() is root.left.left
    assert root.sibling() is None


def test_uncle(family_tree):
    root = family_tree
    assert root.right.left.uncle() is root.left
    assert root.left.right.uncle() is root.right
    assert root.left.uncle() is None
    assert root.uncle() is None


def test_delete_detaches_subtree(basic_tree):
    child = basic_tree.left
    grandchild = child.right
    child.delete()
    assert basic_tree.left is None
    assert child.parent is None
    assert child.right is None
    assert grandchild.parent is None
    assert list(basic_tree.preorder()) == [98, 128, 402]


def test_delete_whole_tree(basic_tree):
    right = basic_tree.right
    basic_tree.delete()
    assert basic_tree.is_leaf() is True
    assert right.is_root() is True
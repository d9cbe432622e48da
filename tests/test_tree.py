import pytest

from arboles.tree import (
    Node,
    count_leaves,
    count_nodes,
    height,
    inorder,
    is_complete,
    leaves,
    postorder,
    preorder,
    render,
)


def perfect_tree():
    return Node(
        4,
        Node(2, Node(1), Node(3)),
        Node(6, Node(5), Node(7)),
    )


def chain(values):
    root = None
    for value in reversed(values):
        root = Node(value, left=root)
    return root


def test_is_leaf():
    assert Node(1).is_leaf()
    assert not Node(1, left=Node(2)).is_leaf()
    assert not Node(1, right=Node(2)).is_leaf()


def test_three_node_traversals():
    root = Node(1, Node(2), Node(3))
    assert list(preorder(root)) == [1, 2, 3]
    assert list(inorder(root)) == [2, 1, 3]
    assert list(postorder(root)) == [2, 3, 1]


def test_inorder_of_ordered_tree_is_sorted():
    assert list(inorder(perfect_tree())) == sorted(inorder(perfect_tree()))


def test_traversals_visit_every_node_once():
    root = perfect_tree()
    values = sorted(preorder(root))
    assert sorted(inorder(root)) == values
    assert sorted(postorder(root)) == values
    assert len(values) == count_nodes(root)


def test_preorder_starts_and_postorder_ends_with_root():
    root = perfect_tree()
    assert next(iter(preorder(root))) == root.value
    assert list(postorder(root))[-1] == root.value


def test_empty_tree():
    assert list(preorder(None)) == []
    assert list(inorder(None)) == []
    assert list(postorder(None)) == []
    assert height(None) == 0
    assert count_nodes(None) == 0
    assert count_leaves(None) == 0
    assert render(None) == ""


@pytest.mark.parametrize("size", [1, 5, 50, 3000])
def test_chain_height_equals_size(size):
    root = chain(list(range(size)))
    assert height(root) == size
    assert count_nodes(root) == size
    assert list(leaves(root)) == [size - 1]


def test_leaves_left_to_right():
    root = perfect_tree()
    assert list(leaves(root)) == [1, 3, 5, 7]
    assert count_leaves(root) == len(list(leaves(root)))


def test_perfect_tree_is_complete():
    assert is_complete(perfect_tree())
    assert is_complete(Node(1))
    assert is_complete(None)


def test_missing_node_is_not_complete():
    root = perfect_tree()
    root.right.right = None
    assert not is_complete(root)
    assert not is_complete(chain([1, 2]))


def test_render_with_string_indent():
    root = Node(1, Node(2), Node(3))
    assert render(root, "   ") == "   3\n1\n   2\n"


def test_render_with_callable_indent():
    root = Node(1, Node(2), Node(3))
    text = render(root, lambda level: "-" * level)
    assert text == "-3\n1\n-2\n"


def test_render_has_one_line_per_node():
    root = perfect_tree()
    lines = render(root).splitlines()
    assert len(lines) == count_nodes(root)
    assert [int(line.strip()) for line in lines] == sorted(inorder(root), reverse=True)
from enum import Enum
from typing import Iterator, List, Optional
import weakref


# ==================== Enums ====================

class NodeKind(Enum):
    """Variant of a tree node, fixed at creation"""
    LEAF = "LEAF"
    COMPOSITE = "COMPOSITE"


# ==================== Exceptions ====================

class CompositeError(Exception):
    """Base class for component tree errors"""
    pass


class InvalidTopologyError(CompositeError):
    """Raised when an add would break the tree shape"""
    pass


class LeafOperationError(CompositeError):
    """Raised by strict leaves when asked to manage children"""
    pass


# ==================== Core Models ====================

class Node:
    """
    One element of a part/whole hierarchy.

    A node is either a leaf or a composite. Both variants expose the same
    operations so client code can treat them uniformly; leaves ignore
    add/remove unless created with strict=True.
    """

    SEPARATOR = "+"
    DEFAULT_LEAF_LABEL = "Leaf"
    DEFAULT_COMPOSITE_LABEL = "Branch"

    def __init__(self, kind: NodeKind, label: Optional[str] = None,
                 strict: bool = False):
        if not isinstance(kind, NodeKind):
            raise ValueError(f"Unknown node kind: {kind}")

        if label is None:
            label = (self.DEFAULT_COMPOSITE_LABEL if kind is NodeKind.COMPOSITE
                     else self.DEFAULT_LEAF_LABEL)

        self._kind = kind
        self._label = label
        self._strict = strict
        self._parent_ref: Optional[weakref.ref] = None
        self._children: List['Node'] = []

    @staticmethod
    def leaf(label: str = DEFAULT_LEAF_LABEL, strict: bool = False) -> 'Node':
        return Node(NodeKind.LEAF, label, strict)

    @staticmethod
    def composite(label: str = DEFAULT_COMPOSITE_LABEL) -> 'Node':
        return Node(NodeKind.COMPOSITE, label)

    @property
    def kind(self) -> NodeKind:
        return self._kind

    @property
    def label(self) -> str:
        return self._label

    @property
    def parent(self) -> Optional['Node']:
        return self.get_parent()

    @parent.setter
    def parent(self, parent: Optional['Node']) -> None:
        self.set_parent(parent)

    # ---------- parent link ----------

    def set_parent(self, parent: Optional['Node']) -> None:
        """Point the back-reference at parent (not owned)"""
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    def get_parent(self) -> Optional['Node']:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    # ---------- child management ----------

    def is_composite(self) -> bool:
        return self._kind is NodeKind.COMPOSITE

    def add(self, child: 'Node') -> None:
        """Append child and make this node its parent"""
        if self._kind is NodeKind.LEAF:
            self._reject_leaf_operation("add")
            return

        if not isinstance(child, Node):
            raise InvalidTopologyError(f"Cannot add {child!r}: not a Node")
        if child is self or child.is_ancestor_of(self):
            raise InvalidTopologyError(
                f"Cannot add {child!r} to {self!r}: it would create a cycle"
            )

        # A node lives in exactly one container; leaves hold nothing to detach
        previous = child.get_parent()
        if previous is not None and previous.is_composite():
            previous.remove(child)

        self._children.append(child)
        child.set_parent(self)

    def remove(self, child: 'Node') -> None:
        """Detach child; absent children are ignored"""
        if self._kind is NodeKind.LEAF:
            self._reject_leaf_operation("remove")
            return

        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                child.set_parent(None)
                return

    def get_children(self) -> List['Node']:
        return list(self._children)

    def _reject_leaf_operation(self, operation: str) -> None:
        if self._strict:
            raise LeafOperationError(f"Cannot {operation} on leaf {self!r}")

    # ---------- aggregation ----------

    def describe(self) -> str:
        """Describe this node and, for composites, every descendant"""
        if self._kind is NodeKind.LEAF:
            return self._label

        results = [child.describe() for child in self._children]
        return f"{self._label}({self.SEPARATOR.join(results)})"

    # ---------- navigation ----------

    def iter_ancestors(self) -> Iterator['Node']:
        """
        Yield the parent, grandparent, ... up to the root.

        set_parent accepts any node, so a loop in the parent chain is
        possible; it raises InvalidTopologyError instead of spinning.
        """
        seen = {id(self)}
        parent = self.get_parent()
        while parent is not None:
            if id(parent) in seen:
                raise InvalidTopologyError(f"Parent chain of {self!r} loops at {parent!r}")
            seen.add(id(parent))
            yield parent
            parent = parent.get_parent()

    def get_root(self) -> 'Node':
        root = self
        for ancestor in self.iter_ancestors():
            root = ancestor
        return root

    def get_depth(self) -> int:
        return sum(1 for _ in self.iter_ancestors())

    def is_ancestor_of(self, node: 'Node') -> bool:
        """Check whether this node is on node's parent chain"""
        return any(ancestor is self for ancestor in node.iter_ancestors())

    def walk(self) -> Iterator['Node']:
        """Pre-order iteration over this node and its descendants"""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def count_leaves(self) -> int:
        return sum(1 for node in self.walk() if not node.is_composite())

    # Original operation names
    setParent = set_parent
    getParent = get_parent
    isComposite = is_composite

    def __repr__(self) -> str:
        return f"Node({self._kind.value}, {self._label!r})"


class Leaf(Node):
    """Node with no children"""

    def __init__(self, label: str = Node.DEFAULT_LEAF_LABEL, strict: bool = False):
        super().__init__(NodeKind.LEAF, label, strict)


class Composite(Node):
    """Node holding an ordered list of children"""

    def __init__(self, label: str = Node.DEFAULT_COMPOSITE_LABEL):
        super().__init__(NodeKind.COMPOSITE, label)


# ==================== Client ====================

def client_code(component: Node) -> None:
    print(f"RESULT: {component.describe()}")


def client_code_2(component1: Node, component2: Node) -> None:
    """No need to check the component classes even when managing the tree"""
    if component1.is_composite():
        component1.add(component2)
    print(f"RESULT: {component1.describe()}")


# ==================== Demo ====================

def print_section(title: str) -> None:
    """Print section header"""
    print(f"\n{'=' * 70}")
    print(f" {title}")
    print('=' * 70)


def demo_composite():
    print_section("Simple Component")
    simple = Leaf()
    print("Client: I've got a simple component:")
    client_code(simple)

    print_section("Composite Tree")
    tree = Composite()
    branch1 = Composite()
    branch1.add(Leaf())
    branch1.add(Leaf())
    branch2 = Composite()
    branch2.add(Leaf())
    tree.add(branch1)
    tree.add(branch2)
    print("Client: Now I've got a composite tree:")
    client_code(tree)

    print_section("Managing The Tree")
    print("Client: I don't need to check the components classes even when managing the tree:")
    client_code_2(tree, simple)
    print(f"Leaves: {tree.count_leaves()}, simple leaf depth: {simple.get_depth()}")

    print_section("Rejecting Cycles")
    try:
        branch1.add(tree)
    except InvalidTopologyError as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    try:
        demo_composite()
    except KeyboardInterrupt:
        print("\n\n⚠️  Demo interrupted by user")
    except Exception as e:
        print(f"\n\n❌ Error occurred: {e}")
        import traceback
        traceback.print_exc()

"""Link-cut trees built from splay trees, with an integer value on every node.

Every represented tree is stored as a virtual tree. Solid paths are splay
trees ordered from descendants (left) to ancestors (right), and they hang off
each other through middle-child pointers, which are plain ``_father`` links
that the father does not hold as a left or right child. The real root of a
tree only ever has middle children, so its own value never takes part in path
operations.

Values are stored as differences: the root of a solid splay tree holds its
absolute value, and every solid child holds its value relative to its solid
father. ``_dmin`` is a node's value minus the minimum value in its solid
subtree.
"""

from __future__ import annotations

_LEFT, _RIGHT = 0, 1


def _excess(node):
    return node._dmin - node._dval if node is not None else 0


def _side(father, child):
    """Return which solid child of ``father`` ``child`` is, or None for a middle child."""
    if father._kids[_LEFT] is child:
        return _LEFT
    if father._kids[_RIGHT] is child:
        return _RIGHT
    return None


def _replace_child(father, old, new):
    if father is None:
        return
    side = _side(father, old)
    if side is not None:
        father._kids[side] = new


def _rotate(f, ch, s):
    """Single rotation lifting ``ch``, the ``s`` child of ``f``, above ``f``."""
    o = 1 - s
    b = ch._kids[o]
    c = f._kids[o]

    f._kids[s] = b
    if b is not None:
        b._father = f
    ch._kids[o] = f

    chf = f._father
    ch._father = chf
    _replace_child(chf, f, ch)
    f._father = ch

    tmp = ch._dval
    if b is not None:
        b._dval += tmp
    ch._dmin = tmp + f._dmin
    ch._dval += f._dval
    f._dval = -tmp
    f._dmin = max(0, _excess(b), _excess(c))


def _zig_zag(g, f, ch, s1, s2):
    """Lift ``ch`` over ``f`` and ``g``; ``f`` is the ``s1`` child of ``g``,
    ``ch`` the ``s2`` child of ``f`` and ``s1 != s2``."""
    a = f._kids[1 - s2]
    b = ch._kids[1 - s2]
    c = ch._kids[s2]
    d = g._kids[1 - s1]

    g._kids[s1] = c
    if c is not None:
        c._father = g
    f._kids[s2] = b
    if b is not None:
        b._father = f
    ch._kids[s2] = g
    ch._kids[1 - s2] = f

    chf = g._father
    ch._father = chf
    _replace_child(chf, g, ch)
    g._father = ch
    f._father = ch

    tmp = ch._dval + f._dval
    if b is not None:
        b._dval += ch._dval
    if c is not None:
        c._dval += tmp
    f._dval = -ch._dval
    ch._dval = tmp + g._dval
    g._dval = -tmp
    ch._dmin = g._dmin + tmp
    g._dmin = max(0, _excess(d), _excess(c))
    f._dmin = max(0, _excess(a), _excess(b))


def _zig_zig(g, f, ch, s):
    """Lift ``ch`` over ``f`` and ``g`` when both are ``s`` children."""
    o = 1 - s
    b = ch._kids[o]
    c = f._kids[o]
    d = g._kids[o]

    g._kids[s] = c
    if c is not None:
        c._father = g
    f._kids[o] = g
    f._kids[s] = b
    if b is not None:
        b._father = f
    ch._kids[o] = f

    chf = g._father
    ch._father = chf
    _replace_child(chf, g, ch)
    g._father = f
    f._father = ch

    if b is not None:
        b._dval += ch._dval
    if c is not None:
        c._dval += f._dval
    tmp = ch._dval + f._dval
    ch._dmin = tmp + g._dmin
    g._dmin = max(0, _excess(c), _excess(d))
    f._dmin = max(0, _excess(b), f._dval + g._dmin)
    old = -ch._dval
    ch._dval = tmp + g._dval
    g._dval = -f._dval
    f._dval = old


def _splice(m):
    """Make the middle child ``m`` of a solid root the left child of its father."""
    f = m._father
    left = f._kids[_LEFT]
    right = f._kids[_RIGHT]
    f._kids[_LEFT] = m

    m._dval -= f._dval
    if left is not None:
        left._dval += f._dval
    f._dmin = max(0, _excess(right), m._dmin - m._dval)


def _splay_solid(ch):
    """Bring ``ch`` to the root of its solid splay tree."""
    while True:
        f = ch._father
        s2 = _side(f, ch)
        if s2 is None:
            return
        g = f._father
        s1 = _side(g, f) if g is not None else None
        if s1 is None:
            _rotate(f, ch, s2)
        elif s1 == s2:
            _zig_zig(g, f, ch, s2)
        else:
            _zig_zag(g, f, ch, s1, s2)


def _splay(ch):
    """Bring ``ch`` up to be a middle child of the real root of its tree."""
    if ch._father is None:
        return ch
    _splay_solid(ch)
    while (f := ch._father)._father is not None:
        _splay_solid(f)
        _splice(ch)
        _rotate(f, ch, _LEFT)
    return ch


class DynItem:
    """A node of a dynamic (link-cut) tree holding an integer value."""

    __slots__ = ("_kids", "_father", "_dval", "_dmin")

    def __init__(self, value=0):
        self._kids: list[DynItem | None] = [None, None]
        self._father: DynItem | None = None
        self._dval = value
        self._dmin = 0

    def link(self, new_father, new_value):
        """Hang the tree rooted at this item below ``new_father`` with ``new_value``.

        Nothing happens when this item is not a root; linking within one tree
        raises ValueError.
        """
        if self._father is not None:
            return
        if new_father is self:
            raise ValueError("cannot link an item to itself")
        _splay(new_father)
        if new_father._father is self:
            raise ValueError("both items are in the same tree")
        self._father = new_father
        self._dval = new_value
        self._dmin = 0

    def cut(self):
        """Cut the edge between this item and its father, if it has one."""
        if self._father is None:
            return
        _splay(self)
        right = self._kids[_RIGHT]
        if right is not None:
            right._father = self._father
            self._kids[_RIGHT] = None
            right._dval += self._dval
        left = self._kids[_LEFT]
        if left is not None:
            self._kids[_LEFT] = None
            left._dval += self._dval
        self._father = None
        self._dmin = 0

    def find_root(self):
        """Return the root of this item's tree."""
        if self._father is None:
            return self
        return _splay(self)._father

    def find_father(self):
        """Return the father of this item in its tree, or None for a root."""
        if self._father is None:
            return None
        _splay_solid(self)
        node = self._kids[_RIGHT]
        if node is not None:
            while node._kids[_LEFT] is not None:
                node = node._kids[_LEFT]
            return node
        return self._father

    def add_value(self, value):
        """Add ``value`` to every item from this one up to, but excluding, the root.

        On a root the value is added to the root itself.
        """
        _splay(self)
        self._dmin = max(0, _excess(self._kids[_RIGHT]))
        below = self._kids[_LEFT]
        self._dval += value
        if below is not None:
            below._dval -= value
            self._dmin = max(self._dmin, below._dmin - below._dval)

    def find_value(self):
        """Return the value of this item."""
        _splay(self)
        return self._dval

    def find_bottleneck(self, neck):
        """Return the nearest item on the path to the root whose value is at most ``neck``.

        The path starts at this item and excludes the root; the root is
        returned when no such item exists.
        """
        if self._father is None:
            return self
        _splay(self)
        if self._dval - self._dmin > neck:
            return self._father
        if self._dval <= neck:
            return self
        candidate = self._kids[_RIGHT]
        if candidate is None:
            return self._father
        value = self._dval + candidate._dval
        if value - candidate._dmin > neck:
            return self._father

        left = candidate._kids[_LEFT]
        while True:
            go_left = left is not None and value + left._dval - left._dmin <= neck
            if not go_left and value <= neck:
                break
            candidate = left if go_left else candidate._kids[_RIGHT]
            left = candidate._kids[_LEFT]
            value += candidate._dval
        return _splay(candidate)
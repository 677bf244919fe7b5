# regex_engine/nfa.py

from enum import Enum, auto
from typing import Callable, List, Optional

from .ast import CharNode, ConcatNode, UnionNode, StarNode, RegexNode
from .errors import MalformedTreeError


# reserved label for epsilon transitions; a '$' literal in a pattern
# stands for the empty string
EPSILON = '$'


# =========================================================
# State
# =========================================================

class StateKind(Enum):
    EPSILON = auto()     # routing junction, up to two ε edges
    CONSUMING = auto()   # exactly one edge, reads `symbol`
    TERMINAL = auto()    # open accept state, no edges yet


class State:
    """
    NFA state. Compared by identity; `id` is its slot in the builder's
    arena and is what serializers print.
    """

    def __init__(self, id_: int, kind: StateKind, symbol: Optional[str] = None):
        self.id = id_
        self.kind = kind
        self.symbol = symbol
        self.next: List[Optional["State"]] = [None, None]

    @property
    def edges(self) -> List["State"]:
        return [s for s in self.next if s is not None]

    def retype_as_junction(self):
        # only an open accept state may become a junction, and only once
        assert self.kind is StateKind.TERMINAL, f"{self} is not an open accept state"
        assert not self.edges, f"{self} already has outgoing edges"
        self.kind = StateKind.EPSILON
        self.symbol = EPSILON

    def __repr__(self):
        if self.kind is StateKind.CONSUMING:
            return f"State({self.id}, {self.kind.name}, '{self.symbol}')"
        return f"State({self.id}, {self.kind.name})"


# =========================================================
# Transition (one edge-creation event)
# =========================================================

class Transition:
    def __init__(self, source: State, target: State, label: str):
        self.source = source
        self.target = target
        self.label = label

    def is_epsilon(self):
        return self.label == EPSILON

    def __repr__(self):
        return f"{self.source.id} --{self.label}--> {self.target.id}"


# =========================================================
# Fragment (start + accept)
# =========================================================

class Fragment:
    def __init__(self, start: State, accept: State):
        self.start = start
        self.accept = accept


# =========================================================
# Final NFA
# =========================================================

class Nfa:
    def __init__(self, start: State, accept: State,
                 states: List[State], transitions: List[Transition]):
        self.start = start
        self.accept = accept
        self.states = states              # allocation order
        self.transitions = transitions    # wiring order

    @property
    def state_count(self):
        return len(self.states)

    @property
    def transition_count(self):
        return len(self.transitions)

    def __repr__(self):
        return (f"NFA(states={self.state_count}, transitions={self.transition_count}, "
                f"start={self.start.id}, accept={self.accept.id})")


# =========================================================
# NFA Builder (Thompson construction)
# =========================================================

class NfaBuilder:
    """
    Bottom-up Thompson construction. Every edge is reported to `sink`
    the moment it is wired, in the same order it lands in
    `Nfa.transitions`.
    """

    def __init__(self, sink: Optional[Callable[[Transition], None]] = None):
        self.sink = sink
        self.nextId = 0
        self.states: List[State] = []
        self.transitions: List[Transition] = []

    # new NFA state
    def new_state(self, kind: StateKind, symbol: Optional[str] = None) -> State:
        s = State(self.nextId, kind, symbol)
        self.nextId += 1
        self.states.append(s)
        return s

    # wire `source` -> `target` into the first free slot
    def link(self, source: State, target: State, label: str):
        slot = source.next.index(None) if None in source.next else -1
        assert slot >= 0, f"{source} has no free edge slot"
        source.next[slot] = target

        t = Transition(source, target, label)
        self.transitions.append(t)
        if self.sink is not None:
            self.sink(t)

    # entry point
    def build(self, root: RegexNode) -> Nfa:
        self.nextId = 0
        self.states = []
        self.transitions = []

        frag = self.build_frag(root)
        assert frag.accept.kind is StateKind.TERMINAL and not frag.accept.edges

        return Nfa(frag.start, frag.accept, self.states, self.transitions)

    # ============= recursive AST → fragment ==================

    def build_frag(self, n: RegexNode) -> Fragment:
        if isinstance(n, CharNode):
            return self.literal(n.ch)
        if isinstance(n, ConcatNode):
            self.require(n, n.left, n.right)
            return self.concat(n)
        if isinstance(n, UnionNode):
            self.require(n, n.left, n.right)
            return self.union(n)
        if isinstance(n, StarNode):
            self.require(n, n.child)
            return self.star(n)

        raise MalformedTreeError(f"Unknown AST node type: {type(n).__name__}")

    @staticmethod
    def require(node, *children):
        if any(not isinstance(c, RegexNode) for c in children):
            raise MalformedTreeError(f"{node.kind} node is missing a child")

    # ============= fragment operations ==================

    # literal character
    def literal(self, ch: str) -> Fragment:
        if ch == EPSILON:
            q = self.new_state(StateKind.EPSILON, EPSILON)
        else:
            q = self.new_state(StateKind.CONSUMING, ch)
        f = self.new_state(StateKind.TERMINAL)
        self.link(q, f, ch)
        return Fragment(q, f)

    # concat
    def concat(self, n: ConcatNode) -> Fragment:
        x = self.build_frag(n.left)
        y = self.build_frag(n.right)

        x.accept.retype_as_junction()
        self.link(x.accept, y.start, EPSILON)

        return Fragment(x.start, y.accept)

    # union
    def union(self, n: UnionNode) -> Fragment:
        q = self.new_state(StateKind.EPSILON, EPSILON)
        f = self.new_state(StateKind.TERMINAL)

        x = self.build_frag(n.left)
        y = self.build_frag(n.right)

        # branch
        self.link(q, x.start, EPSILON)
        self.link(q, y.start, EPSILON)

        # merge
        x.accept.retype_as_junction()
        y.accept.retype_as_junction()
        self.link(x.accept, f, EPSILON)
        self.link(y.accept, f, EPSILON)

        return Fragment(q, f)

    # star
    def star(self, n: StarNode) -> Fragment:
        q = self.new_state(StateKind.EPSILON, EPSILON)
        f = self.new_state(StateKind.TERMINAL)

        x = self.build_frag(n.child)

        self.link(q, x.start, EPSILON)
        x.accept.retype_as_junction()
        self.link(x.accept, x.start, EPSILON)
        self.link(x.accept, f, EPSILON)
        self.link(q, f, EPSILON)

        return Fragment(q, f)

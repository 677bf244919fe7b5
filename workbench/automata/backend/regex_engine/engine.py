from automata.conf import engine_setting

from .parser import RegexParser
from .nfa import NfaBuilder
from .dot import render_dot, write_dot
from .graph import summarize
from .errors import RegexDepthError


class RegexEngine:
    """
    Parse fully, then build. Nothing is serialized unless both steps
    succeeded, so a bad pattern never leaves a half-written DOT file.
    """

    def __init__(self, pattern, strict=None, max_depth=None):
        self.pattern = pattern
        self.strict = engine_setting("STRICT") if strict is None else strict
        max_depth = engine_setting("MAX_DEPTH") if max_depth is None else max_depth

        parser = RegexParser(max_depth=max_depth)
        try:
            self.tree = parser.parse(pattern, strict=self.strict)
            self.cursor = parser.cursor
            self.nfa = NfaBuilder().build(self.tree)
        except RecursionError:
            raise RegexDepthError("Pattern nesting exceeds the interpreter recursion limit")

    @property
    def unconsumed(self) -> str:
        return self.pattern[self.cursor:]

    def parse_tree(self):
        return [node.symbol for node in self.tree.preorder()]

    def dot(self) -> str:
        return render_dot(self.nfa)

    def write_dot(self, path=None):
        return write_dot(self.nfa, path or engine_setting("DOT_OUTPUT"))

    def summary(self):
        return summarize(self.nfa)

    def as_dict(self):
        nfa = self.nfa
        return {
            "pattern": self.pattern,
            "tree": self.parse_tree(),
            "tree_repr": repr(self.tree),
            "cursor": self.cursor,
            "unconsumed": self.unconsumed,
            "nfa": {
                "start": nfa.start.id,
                "accept": nfa.accept.id,
                "states": [
                    {"id": s.id, "kind": s.kind.name, "symbol": s.symbol}
                    for s in nfa.states
                ],
                "transitions": [
                    {"from": t.source.id, "to": t.target.id, "label": t.label}
                    for t in nfa.transitions
                ],
            },
            "stats": self.summary(),
        }

# regex_engine/dot.py

from pathlib import Path
from typing import List, Union

from .nfa import Nfa, State


PREAMBLE = [
    "digraph {",
    '\tnode[label="", shape="circle"]',
    '\trankdir="LR"',
]


def state_token(state: State) -> str:
    return f"s{state.id}"


def format_label(symbol: str) -> str:
    return symbol.replace("\\", "\\\\").replace('"', '\\"')


def render_dot(nfa: Nfa) -> str:
    """Graphviz text for `nfa`: edges in wiring order, then start/accept styling."""
    lines: List[str] = list(PREAMBLE)

    for t in nfa.transitions:
        lines.append(
            f'\t{state_token(t.source)} -> {state_token(t.target)} '
            f'[label="{format_label(t.label)}"]'
        )

    lines.append(f'\t{state_token(nfa.start)} [label="q"]')
    lines.append(f'\t{state_token(nfa.accept)} [label="f", shape="doublecircle"]')
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(nfa: Nfa, path: Union[str, Path]) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_dot(nfa), encoding="utf8")
    return out

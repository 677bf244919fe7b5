# regex_engine/graph.py

from typing import Dict, Set

import networkx as nx
from networkx.algorithms import isomorphism

from .nfa import Nfa, StateKind


def to_networkx(nfa: Nfa) -> nx.MultiDiGraph:
    """
    One node per state id (kind / symbol / role attributes) and one edge
    per transition, keeping the wiring index as `order`.
    """
    G = nx.MultiDiGraph()

    for s in nfa.states:
        if s is nfa.start:
            role = "start"
        elif s is nfa.accept:
            role = "accept"
        else:
            role = "inner"
        G.add_node(s.id, kind=s.kind.name, symbol=s.symbol, role=role)

    for i, t in enumerate(nfa.transitions):
        G.add_edge(t.source.id, t.target.id, label=t.label, order=i)

    return G


def reachable_states(nfa: Nfa) -> Set[int]:
    G = to_networkx(nfa)
    return nx.descendants(G, nfa.start.id) | {nfa.start.id}


def orphan_states(nfa: Nfa) -> Set[int]:
    return {s.id for s in nfa.states} - reachable_states(nfa)


def is_isomorphic(a: Nfa, b: Nfa) -> bool:
    """Same state kinds, roles, edge labels and topology; ids are ignored."""
    node_match = isomorphism.categorical_node_match(["kind", "role"], [None, None])
    edge_match = isomorphism.categorical_multiedge_match("label", None)
    return nx.is_isomorphic(
        to_networkx(a), to_networkx(b),
        node_match=node_match, edge_match=edge_match,
    )


def summarize(nfa: Nfa) -> Dict:
    G = to_networkx(nfa)

    eps = sum(1 for t in nfa.transitions if t.is_epsilon())
    alphabet = sorted({s.symbol for s in nfa.states if s.kind is StateKind.CONSUMING})
    out_degrees = [d for _, d in G.out_degree()]

    return {
        "states": G.number_of_nodes(),
        "transitions": G.number_of_edges(),
        "epsilon_transitions": eps,
        "symbol_transitions": nfa.transition_count - eps,
        "alphabet": "".join(alphabet),
        "reachable": len(nx.descendants(G, nfa.start.id)) + 1,
        "max_out_degree": max(out_degrees) if out_degrees else 0,
    }

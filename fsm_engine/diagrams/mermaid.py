"""
Mermaid Diagram Generation.

Turns a transition table into Mermaid ``stateDiagram-v2`` source, e.g.

    stateDiagram-v2
        idle --> typing: typing
        typing --> idle: canceling

The output can be pasted into https://www.mermaidchart.com/play or any
Markdown renderer with Mermaid support.
"""

from typing import Iterator, Mapping, Union

from ..domain.models import Edge, TransitionTable, display_name
from .loader import render
from .templates import Template


def _iter_edges(transitions: Union[TransitionTable, Mapping]) -> Iterator[Edge]:
    if isinstance(transitions, TransitionTable):
        yield from transitions.edges()
        return
    # Raw mappings are rendered as given, without dangling-state validation.
    for source, edges in transitions.items():
        if not edges:
            continue
        for transition, destination in edges.items():
            yield Edge(source=source, transition=transition, destination=destination)


def generate_mermaid_diagram(transitions: Union[TransitionTable, Mapping]) -> str:
    """
    Render every declared edge as one ``<source> --> <destination>: <transition>``
    line, by source declaration order then transition order.

    States with no transitions (empty mapping or None) produce no lines.
    Pure and deterministic: the same table always yields the same text.
    """
    edges = [
        Edge(
            source=display_name(edge.source),
            transition=display_name(edge.transition),
            destination=display_name(edge.destination),
        )
        for edge in _iter_edges(transitions)
    ]
    return render(Template.STATE_DIAGRAM, edges=edges)

"""
Diagrams - Textual Rendering of Transition Tables

Generates Mermaid state diagrams from a transition table. Independent of any
running StateMachine.
"""

from fsm_engine.diagrams.mermaid import generate_mermaid_diagram

__all__ = [
    "generate_mermaid_diagram",
]

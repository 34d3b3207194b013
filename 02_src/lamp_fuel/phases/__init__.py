"""Pipeline phases for the lamp fuel solver."""

from .ingestion import EdgeListIngestionPhase, parse_edge_list, read_edge_list
from .propagation import PropagationPhase
from .validation import VerificationPhase

__all__ = [
    "EdgeListIngestionPhase",
    "PropagationPhase",
    "VerificationPhase",
    "parse_edge_list",
    "read_edge_list",
]

"""Fixed-point solver for lamp-fueling source radii."""

from .errors import ConfigError, EdgeListFormatError, LampFuelError, SourceNotFoundError
from .graph_model import LampGraph, Link, Source
from .graph_orchestrator import GraphOrchestrator
from .pipeline import PipelinePhase, PipelineRunner
from .solver import ForcingMove, PropagationSolver, SolveResult, solve
from .verification import LinkStatus, VerificationReport, classify, verify

__all__ = [
    "LampGraph",
    "Link",
    "Source",
    "GraphOrchestrator",
    "PipelinePhase",
    "PipelineRunner",
    "PropagationSolver",
    "ForcingMove",
    "SolveResult",
    "solve",
    "LinkStatus",
    "VerificationReport",
    "classify",
    "verify",
    "LampFuelError",
    "SourceNotFoundError",
    "EdgeListFormatError",
    "ConfigError",
]

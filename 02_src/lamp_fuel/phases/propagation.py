"""Propagation phase: run the solver to its fixed point."""

from typing import Any, Dict, Optional

from ..graph_orchestrator import GraphOrchestrator
from ..pipeline import PipelinePhase
from ..solver import PropagationSolver


class PropagationPhase(PipelinePhase):
    phase_name = "propagation"

    def __init__(self, max_passes: Optional[int] = None) -> None:
        self._max_passes = max_passes

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        orchestrator: GraphOrchestrator = context["orchestrator"]
        solver = PropagationSolver(orchestrator.graph, max_passes=self._max_passes)
        result = solver.solve()
        return {
            "solve_result": result,
            "propagation_output": {
                "passes": result.passes,
                "forcing_moves": result.move_count,
                "stalled": result.stalled,
                "hit_pass_limit": result.hit_pass_limit,
            },
        }

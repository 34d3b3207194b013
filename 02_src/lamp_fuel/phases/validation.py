"""Verification phase: classify links once the solver has stopped."""

import logging
from typing import Any, Dict

from ..graph_orchestrator import GraphOrchestrator
from ..pipeline import PipelinePhase
from ..verification import verify

logger = logging.getLogger(__name__)


class VerificationPhase(PipelinePhase):
    phase_name = "verification"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        orchestrator: GraphOrchestrator = context["orchestrator"]
        report = verify(orchestrator.graph)
        for link in report.deficient_links:
            logger.warning(
                "Link %d between %s and %s is unfueled: %d of %d lamps",
                link.index,
                link.endpoint_a,
                link.endpoint_b,
                link.satisfied,
                link.required,
            )
        return {"verification_report": report}

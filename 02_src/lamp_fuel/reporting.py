"""Human-readable rendering of a verification report."""

from typing import List

from .verification import VerificationReport


def render_text(report: VerificationReport) -> str:
    lines: List[str] = ["source radius"]
    for source in report.sources:
        lines.append(f"{source.id} r={source.radius}")
    lines.append("")
    lines.append(f"total fuel {report.total_fuel}")
    for link in report.deficient_links:
        lines.append(f"unfueled lamp!!! {link.endpoint_a} to {link.endpoint_b}")
    return "\n".join(lines)


def render_link_table(report: VerificationReport) -> str:
    lines = ["link  a  b  required  satisfied  status"]
    for link in report.links:
        lines.append(
            f"{link.index} {link.endpoint_a} {link.endpoint_b} "
            f"{link.required} {link.satisfied} {link.status.value}"
        )
    return "\n".join(lines)

"""Text and JSON rendering of analysis results."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from .domain.models import DistrictAnalysis, NetworkAnalysis, RouteResult


def _header(title: str) -> str:
    return f"\n=== {title} ==="


def format_report(
    districts: DistrictAnalysis,
    network: NetworkAnalysis,
    route: Optional[RouteResult] = None,
) -> str:
    """Render the analysis as the plain-text console report."""
    lines: List[str] = ["CITY INFRASTRUCTURE ANALYZER", "==========================="]

    lines.append(_header("City District Hierarchy Analysis"))
    lines.append("Administrative districts (DFS search): " + " ".join(districts.dfs_order))
    lines.append("Administrative districts (BFS search): " + " ".join(districts.bfs_order))

    lines.append(_header("City Road Network Analysis"))
    if not network.start_found:
        lines.append(f"Unknown city: {network.start}")
    else:
        lines.append(f"Connected cities from {network.start}:")
        lines.extend(f"- {name}" for name in network.reachable)
        lines.append("")
        lines.append(f"Shortest travel distances from {network.start}:")
        lines.extend(f"{name}: {distance} km" for name, distance in network.distances.items())

    if route is not None:
        lines.append("")
        if route.is_empty:
            lines.append("No route found.")
        else:
            path_str = " -> ".join(route.path)
            lines.append(f"Shortest route: {path_str}")
            lines.append(f"Total distance: {route.total_distance} km")

    lines.append("")
    lines.append("Analysis complete.")
    return "\n".join(lines)


def report_as_dict(
    districts: DistrictAnalysis,
    network: NetworkAnalysis,
    route: Optional[RouteResult] = None,
) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "districts": {
            "dfs": list(districts.dfs_order),
            "bfs": list(districts.bfs_order),
        },
        "network": {
            "start": network.start,
            "reachable": list(network.reachable),
            "distances_km": dict(network.distances),
        },
    }
    if route is not None:
        data["route"] = {
            "path": list(route.path),
            # JSON has no infinity
            "total_distance_km": None if route.is_empty else route.total_distance,
        }
    return data


def format_json(
    districts: DistrictAnalysis,
    network: NetworkAnalysis,
    route: Optional[RouteResult] = None,
) -> str:
    return json.dumps(report_as_dict(districts, network, route), indent=2, ensure_ascii=False)

"""Services layer - Application orchestration.

Available services:
- InfrastructureAnalyzerService: District and road network analysis
"""

from .analyzer import InfrastructureAnalyzerService

__all__ = ["InfrastructureAnalyzerService"]

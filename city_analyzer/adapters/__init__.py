"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the analyzer to its data sources:
- Network and district storage (CSV files)
"""

"""
landcalc - Land plot investment calculator

Deterministic engine turning a plot's price, size and zoning stage into
costs, taxes, net profit, CAGR, break-even price, financing, sensitivity
tables, alternative-investment comparisons and investment scores.

Modules:
    - core: Rate table, settings, logging and exceptions
    - domain.models: Pydantic value models
    - domain.calculator: Pure cost, return, break-even and scoring functions
    - application.services: Calculator, Compare and PlotDetail orchestration
"""

__version__ = "1.0.0"

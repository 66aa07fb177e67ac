"""Utility modules for SciCalc."""

from scicalc.utils.constants import EPS_PIVOT, EPS_SINGULAR, MAX_COFACTOR_ORDER

__all__ = ["EPS_PIVOT", "EPS_SINGULAR", "MAX_COFACTOR_ORDER"]

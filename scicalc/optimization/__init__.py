"""Optimization for SciCalc.

Fixed-step gradient descent, plus a linear-programming entry point that
reports itself as unsupported.
"""

"""Numerical solvers for SciCalc.

- roots: Newton-Raphson and bisection
- ode: explicit Euler (first order) and RK4 (second order) integrators
- fem: 1-D finite-difference boundary value solver for u'' = f(x)
"""

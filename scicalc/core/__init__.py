"""Core numerical modules for SciCalc.

- primitives: arithmetic, combinatorics, sequences, series, trigonometry
- algebra: closed-form polynomial roots (degree <= 3)
- calculus: finite differences and trapezoidal integration
- linalg: matrix arithmetic, determinant/adjugate/inverse, 2x2 eigen, Gaussian solve
- distance: vector norms, distances and similarities
- statistics: descriptive statistics and distributions
- graph: shortest path, MST, Hamiltonian/Eulerian search, traversal
- transforms: direct DFT and numeric Laplace transform
- errors / outcome: exception hierarchy and tagged result type
- config: solver settings (JSON)
"""

"""SciCalc: numerical toolkit for scientific and engineering calculators.

Linear algebra, graph algorithms, clustering and classification, root
finding, ODE integration, optimisation and transform approximations,
exposed as stateless free functions.
"""

__app_name__ = "SciCalc"
__version__ = "0.3.0"

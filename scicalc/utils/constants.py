"""Numeric constants used throughout SciCalc.

Tolerances, iteration caps and learning-rate defaults shared by the
solvers. Module-level so callers never construct anything to read them.
"""

import math

# Mathematical
PI = math.pi
TWO_PI = 2.0 * math.pi
DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi
SQRT_TWO_PI = math.sqrt(2.0 * math.pi)

# Linear algebra
EPS_PIVOT = 1e-10  # Gaussian elimination aborts below this pivot magnitude
EPS_SINGULAR = 1e-12  # |det| at or below this (times Hadamard bound) is singular
EPS_MATRIX_COMPARE = 1e-9  # element-wise tolerance for matrix predicates
MAX_COFACTOR_ORDER = 9  # cofactor expansion is O(n!)

# Root finding
EPS_DERIVATIVE = 1e-10  # Newton aborts when |f'(x)| falls below this
DEFAULT_TOLERANCE = 1e-6
DEFAULT_MAX_ITERATIONS = 100

# Calculus
DEFAULT_STEP = 1e-5  # finite-difference step
DEFAULT_INTEGRATION_STEPS = 1000
LAPLACE_HORIZON = 100.0  # upper limit replacing infinity in the Laplace integral
LAPLACE_STEPS = 10000

# Learning
EPS_VARIANCE = 1e-6  # Naive Bayes variance floor
EPS_CENTROID = 1e-12  # k-means centroid shift treated as converged
SVM_LEARNING_RATE = 0.01
SVM_EPOCHS = 100
SVR_EPSILON = 0.1

# Optimization
DEFAULT_LEARNING_RATE = 0.01

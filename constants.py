"""
Global constants used throughout the project
"""

import math

# Sentinel for "no known connection yet", compares above every finite weight
INFINITY = math.inf

# Matrix entries equal to this value are not edges (scipy.sparse.csgraph convention)
MATRIX_NULL_VALUE = 0

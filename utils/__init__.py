"""
Pure algorithms with no domain-specific dependencies.

Modules:
    graph       - Connected component extraction
    union_find  - Union-Find (disjoint set) data structure over vertices
"""

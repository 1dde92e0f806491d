"""
Estimator modules for chilean_run.

This package contains heuristics derived from the numeric body:
- age: Birth year, birth month and age estimation
"""

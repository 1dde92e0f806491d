"""
Generator modules for chilean_run.

This package contains identifier generators:
- run_generator: Random, syntactically valid RUN/RUT generation
"""

"""Functional primitives for sortedsearch.

This module provides array-oriented counterparts of the scalar search routines.
Utilities are stateless and side-effect-free and are JIT-compiled with JAX so
they can be composed into larger numeric pipelines.
"""

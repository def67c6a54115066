"""Domain layer — algebraic contracts, combinators, and folds.

This layer depends only on stdlib.
It must never import from laws or config, and it never logs.
"""

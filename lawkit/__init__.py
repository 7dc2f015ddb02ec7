"""
lawkit - Algebraic law checking for Python types

Composes named, hierarchical rule sets from the axioms of algebraic
structures (semigroups through fields, lattices through Boolean algebras)
and runs them as Hypothesis-backed randomized property checks against any
type that claims the structure.
"""

__version__ = "0.1.0"

# Configuration is available at top level for convenience
from lawkit.config import config

__all__ = ["config", "__version__"]

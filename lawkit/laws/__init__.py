"""
Law suite composition for algebraic structures.

## Components

- **predicate**: Domain restrictions for axioms (e.g. nonzero divisors)
- **prop**: Executable, seeded Hypothesis properties
- **support**: Generator, equality and predicate for one type
- **ruleset**: Named rule sets composed from bases and parents
- **rules**: Reusable axiom templates
- **group_laws** / **ring_laws** / **lattice_laws** / **logic_laws**:
  Builders producing the rule set of each structure level

## Example Usage

```python
from fractions import Fraction
from hypothesis import strategies as st
from lawkit.laws import RingLaws, Predicate
from lawkit.algebra import RationalField

laws = RingLaws.for_type(
    st.fractions(max_denominator=50),
    predicate=Predicate.nonzero(Fraction(0)),
)
rule_set = laws.field(RationalField())
for path, prop in rule_set.flatten():
    print(path)
```
"""

from .predicate import Predicate
from .prop import (
    AxiomViolation,
    Outcome,
    Property,
    PropertyResult,
    for_all,
)
from .support import TypeSupport
from .ruleset import RuleSet, compose
from .group_laws import AdditiveProperties, GroupLaws, GroupProperties
from .ring_laws import MultiplicativeProperties, RingLaws, RingProperties
from .lattice_laws import LatticeLaws, LatticeProperties
from .logic_laws import LogicLaws, LogicProperties

__all__ = [
    "Predicate",
    "AxiomViolation",
    "Outcome",
    "Property",
    "PropertyResult",
    "for_all",
    "TypeSupport",
    "RuleSet",
    "compose",
    "GroupLaws",
    "GroupProperties",
    "AdditiveProperties",
    "RingLaws",
    "RingProperties",
    "MultiplicativeProperties",
    "LatticeLaws",
    "LatticeProperties",
    "LogicLaws",
    "LogicProperties",
]

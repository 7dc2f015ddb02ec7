"""
Rendering and running law suites.

## Components

- **render**: Rule set -> ordered, fully qualified laws (RenderedLaw, LawSuite)
- **runner**: LawRunner, check_laws, assert_laws
- **reports**: LawResult, LawReport, LawHistory
- **catalog**: Stock instances and the structures they claim

## Example Usage

```python
from hypothesis import strategies as st
from lawkit.algebra import IntegerRing
from lawkit.laws import RingLaws
from lawkit.suite import check_laws

report = check_laws(RingLaws.for_type(st.integers()).commutative_ring(IntegerRing()))
print(report.format())
```
"""

from .render import LawSuite, RenderedLaw, render
from .reports import LawHistory, LawMetrics, LawReport, LawResult
from .runner import LawRunner, assert_laws, check_laws, law_seed

__all__ = [
    "LawSuite",
    "RenderedLaw",
    "render",
    "LawHistory",
    "LawMetrics",
    "LawReport",
    "LawResult",
    "LawRunner",
    "assert_laws",
    "check_laws",
    "law_seed",
]

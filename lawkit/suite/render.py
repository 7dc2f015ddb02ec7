"""
Law suite rendering.

Turns a rule set into the ordered list of laws a runner executes. At every
node of the bases graph the renderer emits the node's own axioms and the
axioms its parents imply (each parent once, even when it is reachable
through several paths), then descends into the bases.

Rendering keeps a set of rule-set identities whose axioms were already
emitted. Passing the same set to several ``render`` calls (or using
LawSuite) verifies a shared ancestor once per run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from lawkit.laws.prop import Property
from lawkit.laws.ruleset import PATH_SEPARATOR, RuleSet
from lawkit.logging import get_lawkit_logger

log = get_lawkit_logger("render")


@dataclass(frozen=True)
class RenderedLaw:
    """
    One executable law.

    Attributes:
        prefix: Path of the rule set node the law is rendered at
        axiom: Axiom name
        prop: The property to run
        declared_in: Name of the rule set that declares the axiom
        inherited: True when the axiom comes from a parent of the node
    """

    prefix: str
    axiom: str
    prop: Property
    declared_in: str
    inherited: bool = False

    @property
    def path(self) -> str:
        """Fully qualified name, e.g. ``field.multiplicative.base-nonzero.left inverse``."""
        return f"{self.prefix}{PATH_SEPARATOR}{self.axiom}"


def render(
    rule_set: RuleSet,
    already_rendered: Optional[Set[int]] = None,
    prefix: Optional[str] = None,
) -> List[RenderedLaw]:
    """
    Render a rule set into its ordered laws.

    Args:
        rule_set: Root of the suite
        already_rendered: Identities (``id()``) of rule sets whose axioms were
            already emitted; updated in place with everything emitted here
        prefix: Path of the root; defaults to its name

    Returns:
        Laws in deterministic order: own, then inherited, then bases in
        declaration order
    """
    seen: Set[int] = already_rendered if already_rendered is not None else set()
    laws: List[RenderedLaw] = []

    def visit(node: RuleSet, path: str) -> None:
        if id(node) not in seen:
            for axiom, prop in node.props:
                laws.append(RenderedLaw(path, axiom, prop, node.name))
            seen.add(id(node))

        for axiom, prop, ancestor in node.inherited_props(skip=seen):
            laws.append(RenderedLaw(path, axiom, prop, ancestor.name, inherited=True))
        seen.update(id(ancestor) for ancestor in node.ancestors())

        for label, base in node.bases:
            visit(base, f"{path}{PATH_SEPARATOR}{label}")

    root = rule_set.name if prefix is None else prefix
    visit(rule_set, root)
    log.debug(f"Rendered {len(laws)} laws for '{root}'", suite=root, laws=len(laws))
    return laws


class LawSuite:
    """Several root rule sets rendered together, sharing ancestors."""

    def __init__(self, name: str, roots: Sequence[RuleSet]):
        self.name = name
        self.roots = list(roots)

    def render(self) -> List[RenderedLaw]:
        seen: Set[int] = set()
        laws: List[RenderedLaw] = []
        for root in self.roots:
            laws.extend(render(root, already_rendered=seen))
        return laws

    def __repr__(self) -> str:
        return f"LawSuite(name={self.name!r}, roots={[r.name for r in self.roots]})"

"""
Rule sets: named, immutable bundles of axiom properties.

A rule set has two kinds of edges:

- ``bases`` are labelled sub-rule-sets whose properties it incorporates.
  Flattening walks them depth-first and qualifies every axiom with the
  labels on the way down.
- ``parents`` are rule sets whose axioms are implied by this one. They never
  contribute to ``flatten()``; the renderer uses them to collect inherited
  axioms exactly once and to skip ancestors that were already verified in
  the same run.

Identity is object identity. Two rule sets that share a name are never
conflated.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from lawkit.config import config
from lawkit.errors import ConstructionError, CyclicBasesError, DuplicateAxiomError
from lawkit.logging import get_lawkit_logger, log_construction

from .prop import Property

log = get_lawkit_logger("ruleset")

PATH_SEPARATOR = "."

NamedProp = Tuple[str, Property]
LabelledBase = Tuple[str, "RuleSet"]


class RuleSet:
    """
    A named bundle of axiom properties composed from base rule sets.

    Instances are immutable after construction. Construction validates the
    bases graph and the axiom names and fails fast with a ConstructionError.
    """

    def __init__(
        self,
        name: str,
        bases: Iterable[LabelledBase] = (),
        parents: Iterable["RuleSet"] = (),
        props: Iterable[NamedProp] = (),
        strict: Optional[bool] = None,
    ):
        """
        Compose a rule set.

        Args:
            name: Display name, the first segment of every flattened path
            bases: Ordered (label, rule set) pairs that contribute properties
            parents: Rule sets whose axioms this one implies
            props: Ordered (axiom name, property) pairs declared at this level
            strict: Raise on duplicate axiom names; defaults to
                ``config.laws.strict_duplicates``

        Raises:
            CyclicBasesError: If the bases graph is cyclic
            DuplicateAxiomError: In strict mode, if ``props`` repeats a name or
                two different properties among ``props`` and the ancestors'
                props share a name
            ConstructionError: If two bases share a label
        """
        self._name = name
        self._bases: Tuple[LabelledBase, ...] = tuple(
            (label, base) for label, base in bases
        )
        self._parents: Tuple[RuleSet, ...] = tuple(parents)
        if strict is None:
            strict = config.laws.strict_duplicates
        self._props: Tuple[NamedProp, ...] = self._unique_props(props, strict)

        labels = [label for label, _ in self._bases]
        if len(set(labels)) != len(labels):
            raise ConstructionError(
                f"Rule set '{name}' has duplicate base labels: {labels}"
            )

        self._check_acyclic()
        self._check_inherited_names(strict)

        log_construction(
            log,
            name,
            bases=labels,
            parents=[p.name for p in self._parents],
            props=len(self._props),
        )

    # -- accessors --------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def bases(self) -> Tuple[LabelledBase, ...]:
        return self._bases

    @property
    def parents(self) -> Tuple["RuleSet", ...]:
        return self._parents

    @property
    def props(self) -> Tuple[NamedProp, ...]:
        return self._props

    @property
    def axiom_names(self) -> List[str]:
        return [name for name, _ in self._props]

    # -- validation -------------------------------------------------------

    def _unique_props(self, props: Iterable[NamedProp], strict: bool) -> Tuple[NamedProp, ...]:
        collected: Dict[str, Property] = {}
        for axiom, prop in props:
            if axiom in collected:
                if strict:
                    raise DuplicateAxiomError(self._name, axiom)
                log.warning(
                    f"Axiom '{axiom}' declared twice in '{self._name}'; "
                    "the later declaration wins",
                    rule_set=self._name,
                    axiom=axiom,
                )
                del collected[axiom]
            collected[axiom] = prop
        return tuple(collected.items())

    def _check_acyclic(self) -> None:
        # Bases must exist before the rule set that lists them, so this only
        # fires for subclasses that assign ``_bases`` after construction.
        stack: List[Tuple[str, RuleSet]] = [("", self)]
        on_path: Set[int] = set()

        def visit(node: RuleSet) -> None:
            on_path.add(id(node))
            for label, base in node.bases:
                if id(base) in on_path:
                    cycle = [n.name for _, n in stack] + [base.name]
                    raise CyclicBasesError(self._name, cycle)
                stack.append((label, base))
                visit(base)
                stack.pop()
            on_path.discard(id(node))

        visit(self)

    def _check_inherited_names(self, strict: bool) -> None:
        """Reject (or log) axiom names shared by different properties across ancestors."""
        declared: Dict[str, Tuple[Property, str]] = {
            axiom: (prop, self._name) for axiom, prop in self._props
        }
        for ancestor in self.ancestors():
            for axiom, prop in ancestor.props:
                existing = declared.get(axiom)
                if existing is None:
                    declared[axiom] = (prop, ancestor.name)
                    continue
                if existing[0] is prop:
                    continue
                if strict:
                    raise DuplicateAxiomError(
                        self._name, axiom, declared_in=[existing[1], ancestor.name]
                    )
                log.warning(
                    f"Axiom '{axiom}' from '{ancestor.name}' collides with "
                    f"'{existing[1]}' in '{self._name}'; it is checked as "
                    f"'{ancestor.name}{PATH_SEPARATOR}{axiom}'",
                    rule_set=self._name,
                    ancestor=ancestor.name,
                    axiom=axiom,
                )

    # -- traversal --------------------------------------------------------

    def flatten(self, prefix: Optional[str] = None) -> List[Tuple[str, Property]]:
        """
        Flatten the bases graph into qualified (path, property) pairs.

        Own properties come first at the current path, then every base in
        declaration order under ``path.label``. Parents never contribute.

        Args:
            prefix: Path of this rule set; defaults to its name
        """
        path = self._name if prefix is None else prefix
        flat = [(f"{path}{PATH_SEPARATOR}{axiom}", prop) for axiom, prop in self._props]
        for label, base in self._bases:
            flat.extend(base.flatten(f"{path}{PATH_SEPARATOR}{label}"))
        return flat

    def ancestors(self) -> List["RuleSet"]:
        """All transitive parents, each identity once, depth-first pre-order."""
        seen: Set[int] = set()
        ordered: List[RuleSet] = []

        def visit(node: RuleSet) -> None:
            for parent in node.parents:
                if id(parent) in seen or parent is self:
                    continue
                seen.add(id(parent))
                ordered.append(parent)
                visit(parent)

        visit(self)
        return ordered

    def inherited_props(
        self, skip: Optional[Set[int]] = None
    ) -> List[Tuple[str, Property, "RuleSet"]]:
        """
        Own properties of every ancestor, as (axiom, property, ancestor).

        Each ancestor contributes once even if it is reachable through several
        parents. A different property whose name is already taken (possible
        only with ``strict=False``) is qualified with its ancestor's name, so
        it is still checked.

        Args:
            skip: Identities (``id()``) of ancestors to leave out
        """
        declared: Dict[str, Property] = dict(self._props)
        inherited: List[Tuple[str, Property, RuleSet]] = []
        for ancestor in self.ancestors():
            if skip is not None and id(ancestor) in skip:
                continue
            for axiom, prop in ancestor.props:
                existing = declared.get(axiom)
                if existing is prop:
                    continue
                if existing is not None:
                    axiom = f"{ancestor.name}{PATH_SEPARATOR}{axiom}"
                else:
                    declared[axiom] = prop
                inherited.append((axiom, prop, ancestor))
        return inherited

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, "
            f"bases={[label for label, _ in self._bases]}, "
            f"parents={[p.name for p in self._parents]}, "
            f"props={self.axiom_names})"
        )


def compose(
    name: str,
    bases: Sequence[LabelledBase] = (),
    parents: Sequence[RuleSet] = (),
    extra_properties: Sequence[NamedProp] = (),
) -> RuleSet:
    """Build a plain rule set; see RuleSet."""
    return RuleSet(name, bases=bases, parents=parents, props=extra_properties)

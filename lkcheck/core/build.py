"""Turn a `ProofDocument` into an LK tree, and back."""
from __future__ import annotations
import json
import logging
from typing import Dict, List
import networkx as nx
from pydantic import ValidationError
from .. import config
from ..errors import DepthLimitError, ParseError, ProofDocumentError
from ..fol.notation import to_prefix
from ..syntax.parser import parse_formula
from ..proof.lk import LK, RULES, make_node
from ..proof.sequent import Sequent
from .model import ProofDocument, ProofStep, SequentText

log = logging.getLogger(__name__)


def step_graph(doc: ProofDocument) -> nx.DiGraph:
    """Edges run from a step to each premise it cites."""
    g = nx.DiGraph()
    ids = set()
    for step in doc.steps:
        if step.id in ids:
            raise ProofDocumentError(f"Duplicate step id '{step.id}'")
        ids.add(step.id)
        g.add_node(step.id)
    for step in doc.steps:
        for ref in step.premises:
            if ref not in ids:
                raise ProofDocumentError(f"Step '{step.id}' cites unknown premise '{ref}'")
            g.add_edge(step.id, ref)
    return g


def _root(doc: ProofDocument, g: nx.DiGraph) -> str:
    if doc.root is not None:
        if doc.root not in g:
            raise ProofDocumentError(f"Root '{doc.root}' is not a step")
        return doc.root
    roots = [n for n in g.nodes if g.in_degree(n) == 0]
    if len(roots) != 1:
        raise ProofDocumentError(f"Expected exactly one uncited step as root, found {sorted(roots) or 'none'}")
    return roots[0]


def _sequent(step: ProofStep) -> Sequent:
    try:
        return Sequent(tuple(parse_formula(s) for s in step.sequent.antecedent),
                       tuple(parse_formula(s) for s in step.sequent.succedent))
    except ParseError as e:
        raise ProofDocumentError(f"Step '{step.id}': {e}") from e


def build_proof(doc: ProofDocument) -> LK:
    g = step_graph(doc)
    if not nx.is_directed_acyclic_graph(g):
        cycle = [u for u, _ in nx.find_cycle(g)]
        raise ProofDocumentError(f"Premise references form a cycle: {' -> '.join(cycle)}")
    root = _root(doc, g)
    by_id = {s.id: s for s in doc.steps}
    needed = nx.descendants(g, root) | {root}
    built: Dict[str, LK] = {}
    # Reverse topological order: every premise is built before its conclusion.
    for sid in reversed(list(nx.topological_sort(g.subgraph(needed)))):
        step = by_id[sid]
        arity = RULES[step.rule].arity
        if len(step.premises) != arity:
            raise ProofDocumentError(f"Step '{sid}' ({step.rule}) needs {arity} premise(s), has {len(step.premises)}")
        built[sid] = make_node(step.rule, tuple(built[p] for p in step.premises), _sequent(step))
    unused = set(g.nodes) - needed
    if unused:
        log.debug("ignoring steps not below root '%s': %s", root, sorted(unused))
    log.debug("built derivation rooted at '%s' from %d step(s)", root, len(needed))
    return built[root]


def load_document(path: str) -> ProofDocument:
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ProofDocumentError(f"{path}: not valid JSON ({e})") from e
    try:
        return ProofDocument.model_validate(raw)
    except ValidationError as e:
        raise ProofDocumentError(f"{path}: {e}") from e


def load_proof(path: str) -> LK:
    return build_proof(load_document(path))


def proof_to_document(lk: LK, metadata: Dict[str, object] | None = None) -> ProofDocument:
    """Serialize a tree; steps are numbered s1, s2, ... in post-order, root last."""
    steps: List[ProofStep] = []

    def visit(node: LK, depth: int) -> str:
        if depth > config.MAX_DEPTH:
            raise DepthLimitError(f"derivation deeper than {config.MAX_DEPTH}")
        refs = [visit(p, depth + 1) for p in node.premise_nodes]
        sid = f"s{len(steps) + 1}"
        c = node.conclusion
        steps.append(ProofStep(
            id=sid, rule=node.rule, premises=refs,
            sequent=SequentText(antecedent=[to_prefix(f) for f in c.antecedent],
                                succedent=[to_prefix(f) for f in c.succedent])))
        return sid

    root = visit(lk, 0)
    return ProofDocument(steps=steps, root=root, metadata=dict(metadata or {}))

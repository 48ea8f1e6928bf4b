from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple
from .. import config
from ..errors import DepthLimitError
from .lk import LK
from .rules import is_valid_step
from .sequent import Sequent

log = logging.getLogger(__name__)

Path = Tuple[int, ...]


@dataclass(frozen=True)
class StepFailure:
    path: Path        # premise indices from the root; () is the root itself
    rule: str
    conclusion: Sequent

    def where(self) -> str:
        return "root" if not self.path else "root." + ".".join(str(i) for i in self.path)


def iter_nodes(lk: LK) -> Iterator[Tuple[Path, LK]]:
    """Pre-order walk over every node, with its path from the root."""
    stack: List[Tuple[Path, LK]] = [((), lk)]
    while stack:
        path, node = stack.pop()
        if len(path) > config.MAX_DEPTH:
            raise DepthLimitError(f"derivation deeper than {config.MAX_DEPTH}")
        yield path, node
        premises = node.premise_nodes
        for i in reversed(range(len(premises))):
            stack.append((path + (i,), premises[i]))


def find_invalid_steps(lk: LK) -> List[StepFailure]:
    failures = [StepFailure(path, node.rule, node.conclusion)
                for path, node in iter_nodes(lk) if not is_valid_step(node)]
    if failures:
        log.debug("%d invalid step(s) below %s", len(failures), lk.conclusion)
    return failures


def is_valid_proof(lk: LK) -> bool:
    """Every node of the tree, leaves included, is a correct inference."""
    return all(is_valid_step(node) for _, node in iter_nodes(lk))

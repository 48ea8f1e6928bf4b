"""Text rendering of LK derivations.

A node renders as the block of its premise(s), an inference line labelled
with the rule, and its own sequent centred beneath::

    p ⇒ p    q ⇒ q
    ---------------(→L)
    (p → q), p ⇒ q

Every block is a rectangle: all lines are right-padded to the block width.
"""
from __future__ import annotations
from typing import List, Optional
from .. import config
from ..errors import DepthLimitError
from .lk import LK, Axiom


def _half(n: int) -> int:
    # Rounds toward zero so that centring is symmetric for negative slack.
    return n // 2 if n >= 0 else -((-n) // 2)


def _leading(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def _trailing(line: str) -> int:
    return len(line) - len(line.rstrip(" "))


def _pad(lines: List[str]) -> List[str]:
    width = max(len(l) for l in lines)
    return [l.ljust(width) for l in lines]


def _attach(parent: List[str], sequent: str, body_prefix: int, body_len: int, label: str) -> List[str]:
    """Put an inference line and ``sequent`` under ``parent``.

    ``body_prefix``/``body_len`` locate the text of the parent's last line,
    excluding indentation left by earlier centring; the new sequent is
    centred on that span, or the parent is shifted right when the sequent is
    the wider of the two.
    """
    seq_len = len(sequent)
    offset = _half(body_len - seq_len) + body_prefix
    if offset > 0:
        sequent = " " * offset + sequent
    else:
        parent = [" " * -offset + l for l in parent]
        offset = 0
    if seq_len > body_len:
        rule_line = " " * offset + "-" * (seq_len + 1) + label
    else:
        rule_line = " " * body_prefix + "-" * (body_len + 1) + label
    return _pad(parent + [rule_line, sequent])


def _side_by_side(left: List[str], right: List[str], gap: int) -> List[str]:
    # Shorter block gets blank lines on top so both bottoms line up.
    height = max(len(left), len(right))
    left = [" " * len(left[0])] * (height - len(left)) + left
    right = [" " * len(right[0])] * (height - len(right)) + right
    return [l + " " * gap + r for l, r in zip(left, right)]


def _block(node: LK, gap: int, depth: int) -> List[str]:
    if depth > config.MAX_DEPTH:
        raise DepthLimitError(f"derivation deeper than {config.MAX_DEPTH}")
    sequent = str(node.conclusion)
    if isinstance(node, Axiom):
        return [sequent]
    premises = [_block(p, gap, depth + 1) for p in node.premise_nodes]
    if len(premises) == 1:
        parent = premises[0]
        prefix, suffix = _leading(parent[-1]), _trailing(parent[-1])
    else:
        left, right = premises
        parent = _side_by_side(left, right, gap)
        prefix, suffix = _leading(left[-1]), _trailing(right[-1])
    body_len = len(parent[-1]) - prefix - suffix
    return _attach(parent, sequent, prefix, body_len, node.label)


def render(lk: LK, gap: Optional[int] = None) -> str:
    """Multi-line proof-tree diagram of ``lk``."""
    return "\n".join(_block(lk, config.RENDER_GAP if gap is None else gap, 0))

from __future__ import annotations
from typing import List, Optional
from ..proof.check import StepFailure, iter_nodes
from ..proof.lk import LK
from ..proof.render import render

def _cell(s: str) -> str:
    return s.replace("|", "\\|").replace("\n", " ")

def to_markdown(lk: LK, failures: List[StepFailure], title: Optional[str] = None) -> str:
    lines: List[str] = []
    lines.append(f"# {title or 'LK Proof Check'}\n")
    lines.append(f"**End sequent:** `{lk.conclusion}`")
    lines.append(f"**Steps:** {sum(1 for _ in iter_nodes(lk))}")
    if not failures:
        lines.append("**Status:** ✓ Valid derivation\n")
    else:
        lines.append(f"**Status:** ✗ {len(failures)} invalid step(s)\n")
        lines.append("## Invalid steps\n")
        lines.append("| Where | Rule | Conclusion |")
        lines.append("|---|---|---|")
        for f in failures:
            lines.append(f"| {f.where()} | {f.rule} | `{_cell(str(f.conclusion))}` |")
        lines.append("")
    lines.append("## Derivation\n")
    lines.append("```")
    lines.extend(l.rstrip() for l in render(lk).split("\n"))
    lines.append("```")
    return "\n".join(lines) + "\n"
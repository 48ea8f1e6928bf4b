from __future__ import annotations
from typing import List, Optional, Literal, Dict
from pydantic import BaseModel, Field

RuleName = Literal[
    "Axiom",
    "WeakeningLeft", "WeakeningRight",
    "ContractionLeft", "ContractionRight",
    "ExchangeLeft", "ExchangeRight",
    "AndLeft1", "AndLeft2", "AndRight",
    "OrLeft", "OrRight1", "OrRight2",
    "ImpliesLeft", "ImpliesRight",
    "NotLeft", "NotRight",
    "ForallLeft", "ForallRight",
    "ExistsLeft", "ExistsRight",
    "Cut",
]

class SequentText(BaseModel):
    antecedent: List[str] = Field(default_factory=list)   # prefix-syntax formulas
    succedent: List[str] = Field(default_factory=list)

class ProofStep(BaseModel):
    id: str
    rule: RuleName
    premises: List[str] = Field(default_factory=list)      # ids of premise steps, left to right
    sequent: SequentText
    note: Optional[str] = None

class ProofDocument(BaseModel):
    version: str = "1.0"
    steps: List[ProofStep] = Field(default_factory=list)
    root: Optional[str] = None
    metadata: Dict[str, object] = Field(default_factory=dict)

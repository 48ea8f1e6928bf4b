from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Token:
    kind: str
    text: Optional[str] = None

    def __repr__(self) -> str:
        return f"Symbol({self.text!r})" if self.kind == "Symbol" else self.kind


LPAREN = Token("LParen")
RPAREN = Token("RParen")
NOT = Token("Not")
AND = Token("And")
OR = Token("Or")
IMPLIES = Token("Implies")
EQUAL = Token("Equal")
FORALL = Token("Forall")
EXISTS = Token("Exists")


def Symbol(name: str) -> Token:
    return Token("Symbol", name)


SPECIAL = {
    "(": LPAREN, ")": RPAREN, "~": NOT, "^": AND, "v": OR,
    ">": IMPLIES, "=": EQUAL, "V": FORALL, "E": EXISTS,
}
# Characters that end a symbol; ~ ^ v > may occur inside one.
SYMBOL_STOP = frozenset("()=VE ")


def tokenize(text: str) -> List[Token]:
    """Split prefix-notation text into tokens. Spaces only separate."""
    tokens: List[Token] = []
    pos, n = 0, len(text)
    while pos < n:
        ch = text[pos]
        if ch == " ":
            pos += 1
            continue
        if ch in SPECIAL:
            tokens.append(SPECIAL[ch])
            pos += 1
            continue
        end = pos + 1
        while end < n and text[end] not in SYMBOL_STOP:
            end += 1
        tokens.append(Symbol(text[pos:end]))
        pos = end
    return tokens

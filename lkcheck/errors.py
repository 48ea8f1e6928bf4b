from __future__ import annotations

class LKError(Exception): ...
class ParseError(LKError, ValueError):
    def __init__(self, message: str, position: int | None = None):
        super().__init__(message if position is None else f"{message} (at token {position})")
        self.message = message
        self.position = position
class SequentError(LKError, IndexError): ...
class DepthLimitError(LKError, RecursionError): ...
class ProofDocumentError(LKError, ValueError): ...

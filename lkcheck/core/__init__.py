from .model import ProofDocument, ProofStep, SequentText
from .build import build_proof, load_document, load_proof, proof_to_document, step_graph

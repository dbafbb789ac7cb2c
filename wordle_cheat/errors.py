"""
Error taxonomy shared by the lexicon and engine packages.

- FormatError:        input text does not have the expected shape
                      (dictionary records, guess notation).
- NodeReferenceError: a dictionary edge points at a node id that has not
                      been defined yet (children must precede parents).

Both are raised to the caller; a bad dictionary is fatal at load time,
a bad guess is a per-query failure.
"""


class FormatError(ValueError):
    """Malformed dictionary record or guess text."""


class NodeReferenceError(FormatError):
    """Dictionary edge references an undefined node id."""

    def __init__(self, node_id: int, child_id: int):
        super().__init__(f"node {node_id} references undefined node {child_id}")
        self.node_id = node_id
        self.child_id = child_id

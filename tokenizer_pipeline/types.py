from dataclasses import dataclass


@dataclass
class Token:
    """Single token emitted by a tokenizer pipeline.

    Offsets are character offsets into the decoded input (half-open).
    """

    offset_from: int
    offset_to: int
    position: int
    text: str

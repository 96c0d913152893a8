from __future__ import annotations
from ..types import *
from ..errors import require_not_none


def pad_left(sequence: List[T], min_length: int, fill: T) -> None:
    """
    insert fill at the head of the sequence until it holds min_length items.
    an empty sequence is padded exactly like pad_right.
    """
    require_not_none(sequence, 'sequence')
    if not sequence:
        pad_right(sequence, min_length, fill)
        return
    for _ in range(len(sequence), min_length):
        sequence.insert(0, fill)


def pad_right(sequence: List[T], min_length: int, fill: T) -> None:
    """append fill to the sequence until it holds min_length items"""
    require_not_none(sequence, 'sequence')
    for _ in range(len(sequence), min_length):
        sequence.append(fill)

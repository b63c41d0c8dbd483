"""Trans-node analysis: count inference, key generation and the per-node facade.

Python 3.13+.
"""

from .count import contains_count_binding, infer_count
from .keys import ExtractedEntry, generate_entries
from .trans import TransExtraction, TransOptions, analyze_trans

__all__ = [
    "ExtractedEntry",
    "TransExtraction",
    "TransOptions",
    "analyze_trans",
    "contains_count_binding",
    "generate_entries",
    "infer_count",
]

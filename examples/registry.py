"""
Registry of available examples.
"""
from typing import List, TypedDict

class ExampleMetadata(TypedDict):
    path: str
    tags: List[str]
    experimental: bool
    description: str

EXAMPLES: List[ExampleMetadata] = [
    {
        "path": "basic/00_quickstart.py",
        "tags": ["basic", "p0"],
        "experimental": False,
        "description": "Auto-binned histogram over plain numbers with summary statistics."
    },
    {
        "path": "basic/01_weighted_records.py",
        "tags": ["basic", "p0"],
        "experimental": False,
        "description": "Record accessors, weight field, overflow slot, cumulative measure and samples."
    },
    {
        "path": "basic/02_edge_rules.py",
        "tags": ["basic"],
        "experimental": False,
        "description": "Edge rules and underflow/overflow capture on a fixed-width layout."
    },
]

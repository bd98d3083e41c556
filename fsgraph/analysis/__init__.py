"""Analysis stage: resolve declared paths and assemble the module graph."""

from fsgraph.analysis.aliases import choose_module_path
from fsgraph.analysis.graph_builder import ModuleGraphBuilder
from fsgraph.analysis.resolver import SuffixIndex
from fsgraph.analysis.stats import GraphSummary, summarize

__all__ = [
    "GraphSummary",
    "ModuleGraphBuilder",
    "SuffixIndex",
    "choose_module_path",
    "summarize",
]

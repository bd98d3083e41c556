"""fsgraph: index FeatureScript module dependencies into an explorable graph."""

__version__ = "0.1.0"

"""tnfgen — scaffolding commands for tnf projects."""

__version__ = "0.1.0"

"""Offspring distribution analysis."""

from .distribution import sample_offspring, summarize_spread, sweep_eta

__all__ = ["sample_offspring", "summarize_spread", "sweep_eta"]

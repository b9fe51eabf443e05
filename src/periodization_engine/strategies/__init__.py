"""Periodization strategies: one PhaseStrategy subclass per model."""

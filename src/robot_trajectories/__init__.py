"""Represent, validate, and slice multi-joint robot trajectories."""

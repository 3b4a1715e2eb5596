"""Closed vocabularies shared by the engine."""

"""Experiment module package for running systematic benchmark batches.

Provides utilities to generate run configurations, execute them, and record
run-level results in a result manager session.
"""

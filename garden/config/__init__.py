"""Configuration package for the garden.

Tuning constants are grouped by concern: ``genetics`` holds the breeding and
trait-interaction knobs, ``plants`` holds the per-tick growth and reward
numbers.
"""

"""Test suite for ccrider.

Test Structure:
- unit/: Unit tests for individual components
  - curves/: Curve building, Bezier evaluation, lookup tables, sampling
  - rider/: Rider state machine and rider banks
  - config/: Config models and loaders
  - utils/: Math, JSON and logging helpers
  - cli/: Command-line interface
  - reporting/: Curve plots
- conftest.py: Shared fixtures and test configuration
"""

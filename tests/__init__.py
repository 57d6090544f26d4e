"""Test suite for phimotion.

Test Structure:
- unit/: Unit tests for individual components
  - sequence/: Constants and Fibonacci lookup
  - timing/: Durations, easing curves, golden-ratio helpers
  - stagger/: Delay distribution
  - accessibility/: Reduced-motion gate and preference sources
  - scheduling/: Timer backends and the sequence scheduler
  - parallax/: Parallax calculator and tracker
  - config/, utils/, cli/: Ambient stack
- integration/: End-to-end sequencing scenarios
- conftest.py: Shared fixtures
"""

"""
Test suite for PyTerraNoise package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for the noise generators, terrain helpers, exports and CLI
- Integration tests for complete heightmap workflows

Run with: pytest
"""

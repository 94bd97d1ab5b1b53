"""Test suite for the struct offset extractor.

Test Structure:
- domain/services/: walker, path builder, emitter, matcher, registry
- domain/services/parsing/: DIE to layout model parsing with mocked DIEs
- infrastructure/: configuration and output sink
- application/: full runs with a mocked DWARF reader

Run tests with pytest:
    pytest              # Run all tests
    pytest -m unit      # Run unit tests only
"""

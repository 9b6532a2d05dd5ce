"""
Unit Tests for Checkers Engine

This package contains unit tests for all checkers engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_moves.py

    # Run with coverage
    pytest tests/ --cov=checkers_engine --cov-report=html

    # Run specific test
    pytest tests/test_search.py::TestFindBestSequence::test_forced_chain_returned_whole

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""

"""
Test fixtures for the BFHL service.

- sample_cases.json: request tokens paired with the expected classification
"""

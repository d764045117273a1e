"""
Unit tests for the BFHL service.

Test individual components in isolation:
- Classifier (numeric parse policy, categories, concat string, sum)
- Identity (user_id format)
- Data and API models (validation, serialization)
- Error handler helpers and dependencies
"""

"""
Integration tests for the BFHL service.

Exercise the full FastAPI app through TestClient: routing, validation,
error envelopes, CORS, middleware and metrics exposure.
"""

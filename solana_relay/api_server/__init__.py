"""
API server — FastAPI application exposing the relay endpoints.

Routes validate path parameters, call the shared upstream clients, and map
every RelayError to an {"error": message} response.
"""

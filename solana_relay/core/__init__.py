"""
Core types shared by the clients and the API server: error taxonomy and
transient upstream values.
"""

"""
Shared service utilities.

- http.py - ``requests.Session`` with retry/backoff and a default timeout
"""

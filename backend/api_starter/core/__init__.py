"""Core — pure request-policy logic (origin checks, envelopes, address resolution).

Invariants:
    - No FastAPI/Starlette imports: every function here is callable without a server
    - No environment reads: configuration arrives as parameters
"""

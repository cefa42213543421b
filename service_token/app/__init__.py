"""
Token Service package.

This package exposes the FastAPI application for issuing, verifying and
decoding HMAC-signed JSON Web Tokens:

- app.main: Application entrypoint that wires routes and lifecycle.
- app.jwt: The token engine (codec, signer, verifier, decoder, errors).
- app.partner: Fixed header and claims for partner tokens.

Design notes:
- The engine is pure: it performs no I/O and never logs. Logging, metrics
  and the mapping of errors to HTTP responses live in app.main.
- The signing secret is read once from configuration at startup and never
  logged.
"""

"""
auth — User authentication module.

Provides:
  • Password hashing (argon2id) and verification
  • JWT token creation & verification (HS256, issuer ``chirpy``)
  • Register / Login API routes
  • ``get_current_user_id`` FastAPI dependency
"""

"""
auth — User authentication module.

Provides:
  • JWT token creation & verification (HS256, 24 h expiry)
  • Password hashing (bcrypt)
  • Register / Login / current-user API routes
  • ``get_current_user_id`` FastAPI dependency
"""

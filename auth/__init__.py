"""
auth — User authentication module.

Provides:
  • Password hashing (bcrypt)
  • Signed, time-bound identity tokens
  • Sign-up / log-in / user lookup API routes
  • ``authentication`` FastAPI dependency guarding protected routes
"""

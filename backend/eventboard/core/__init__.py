# eventboard/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- db: Database configuration and connection management
- dates: Event date parsing (RFC 3339 or YYYY-MM-DD)
- errors: Domain error taxonomy
- security: Password hashing and JWT access tokens
"""

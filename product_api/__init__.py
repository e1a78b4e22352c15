"""Product catalogue API with JWT authentication."""

"""Infrastructure adapters: PostgreSQL pool, repositories and the view registry."""

"""Infrastructure — database, repositories, and logging setup (imperative shell)."""

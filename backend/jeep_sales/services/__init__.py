"""Services — orchestration between routes and repositories (imperative shell)."""

"""API Schemas — Pydantic models describing request/response bodies."""

"""HTTP layer: FastAPI app factory, /tasks router and request/response schemas."""

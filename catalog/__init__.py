"""Product catalog: FastAPI + MongoDB service, API client and storefront state."""

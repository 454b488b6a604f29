"""
FastAPI routers grouped by domain.

Each module exposes an APIRouter that the app factory includes. Endpoints stay
thin: they unpack the request, call a service and shape the JSON response.
"""

"""View modules for manual routing.

This project uses a custom router in `app.py` (see `utils.routing`) instead of
Streamlit's automatic multi-page system, so that record pages can be addressed
by path, e.g. `?page=/candidates/cand_123`. Every page function takes the route
params dict resolved from the path.

Add any new page as a module with a view callable, a route in
`utils.routing.ROUTES` and an entry in `PAGE_REGISTRY` inside `app.py`.
"""

"""View modules for manual routing.

The dashboard uses the router in `app.py` instead of Streamlit's automatic
multi-page system. Every page lives under `views/` and exposes a `view()`
function.

Add a new page as a module with a `view()` callable and register it in
`PAGE_REGISTRY` inside `app.py`.
"""

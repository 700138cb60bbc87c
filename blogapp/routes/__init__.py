# Routes package init
"""
Blog Backend — API Routes Package
=================================

Route Inventory:
    - posts.py:   GET  /api/posts   (list posts)
                  POST /api/posts   (create a post)
    - health.py:  GET  /health      (service health check)

Routes stay thin: they read the request, call PostService, and set the
status code. Error mapping lives in main.py.
"""

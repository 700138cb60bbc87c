# Services package init
"""
Blog Backend — Services Package
===============================

What:  Post logic independent of HTTP.

Service Inventory:
    - post_service.py: PostService — list and create posts
"""

from blogapp.models.post import Post

__all__ = ["Post"]

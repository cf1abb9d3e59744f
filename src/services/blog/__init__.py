"""Blog post listing and retrieval backed by Notion."""

from .results import BlogPost, PostMeta, PostParams, PostProps, PostSummary  # noqa: F401
from .service import Blog, BlogBackend, PublishedPropertyError  # noqa: F401

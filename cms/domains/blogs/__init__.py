from cms.domains.blogs.entities import Blog
from cms.domains.blogs.schemas import BlogPayload, BlogResponse
from cms.domains.blogs.services import BLOG_LABELS, BlogService

__all__ = ["Blog", "BlogPayload", "BlogResponse", "BLOG_LABELS", "BlogService"]

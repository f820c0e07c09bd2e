from functools import lru_cache

from blogsearch.service import PublicBlogService, create_public_blog_service
from utils.config import PublicBlogSettings


@lru_cache
def get_settings() -> PublicBlogSettings:
    return PublicBlogSettings()


def get_public_blog_service() -> PublicBlogService:
    return create_public_blog_service(settings=get_settings())

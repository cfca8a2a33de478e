from interfaces.api.routes.blog_routes import router as blog_router

__all__ = ["blog_router"]

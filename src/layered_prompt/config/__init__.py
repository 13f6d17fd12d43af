from .settings import BuildRequest, Settings

__all__ = ["BuildRequest", "Settings"]

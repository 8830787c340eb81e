from .auth import LoginForm, LoginRequest
from .commentable import Commentable, CommentableKind
from .seed import ChunkSizes, SeedTargets

__all__ = [
    # auth
    "LoginRequest",
    "LoginForm",
    # commentable
    "Commentable",
    "CommentableKind",
    # seed
    "ChunkSizes",
    "SeedTargets",
]

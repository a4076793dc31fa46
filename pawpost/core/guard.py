# pawpost/core/guard.py

from pawpost.core.errors import Forbidden


def authorize(post, acting_user_id: int):
    """Allow the write only when the acting user owns the post."""
    if post.author_id != acting_user_id:
        raise Forbidden(f"user {acting_user_id} does not own post {post.id}")

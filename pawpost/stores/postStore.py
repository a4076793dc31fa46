import logging

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from pawpost.core.errors import ForeignKeyViolation, NotFound, StoreError
from pawpost.models.post import Post
from pawpost.models.user import User  # noqa: F401  (resolves Post.author)

logger = logging.getLogger("pawpost.stores.posts")


class PostStore:
    """All database access for posts.

    Posts handed back to callers always have `author` loaded so the router can
    show the author's email without another query.
    """

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Post).options(joinedload(Post.author))

    def create(self, title: str, content: str, author_id: int) -> Post:
        db_post = Post(title=title, content=content, author_id=author_id)
        try:
            self.db.add(db_post)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ForeignKeyViolation(f"author {author_id} does not exist") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(f"could not create post for author {author_id}") from exc
        return self.get_by_id(db_post.id)

    def list_all(self):
        try:
            return self._query().order_by(Post.created_at.desc(), Post.id.desc()).all()
        except SQLAlchemyError as exc:
            raise StoreError("could not list posts") from exc

    def get_by_id(self, post_id: int) -> Post:
        try:
            post = self._query().filter(Post.id == post_id).first()
        except SQLAlchemyError as exc:
            raise StoreError(f"could not load post {post_id}") from exc
        if post is None:
            raise NotFound(f"no post with id {post_id}", detail="Post not found")
        return post

    def update(self, post_id: int, title: str, content: str, owner_id: int = None) -> Post:
        # One conditional UPDATE, so ownership cannot change between check and write
        stmt = update(Post).where(Post.id == post_id)
        if owner_id is not None:
            stmt = stmt.where(Post.author_id == owner_id)
        stmt = stmt.values(title=title, content=content).execution_options(synchronize_session=False)

        rowcount = self._execute(stmt, f"could not update post {post_id}")
        if rowcount == 0:
            raise NotFound(f"post {post_id} not updated (missing or not owned by {owner_id})",
                           detail="Post not found")
        self.db.expire_all()
        return self.get_by_id(post_id)

    def delete(self, post_id: int, owner_id: int = None):
        stmt = delete(Post).where(Post.id == post_id)
        if owner_id is not None:
            stmt = stmt.where(Post.author_id == owner_id)
        stmt = stmt.execution_options(synchronize_session=False)

        rowcount = self._execute(stmt, f"could not delete post {post_id}")
        if rowcount == 0:
            raise NotFound(f"post {post_id} not deleted (missing or not owned by {owner_id})",
                           detail="Post not found")
        logger.info("Deleted post %s", post_id)

    def _execute(self, stmt, failure: str) -> int:
        try:
            result = self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(failure) from exc
        return result.rowcount

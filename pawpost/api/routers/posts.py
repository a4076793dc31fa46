from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from pawpost.api.schemas.schemas import (
    MAX_ID, PostCreate, PostUpdate, PostDelete, PostResponse, PostEnvelope, PostMessage, PostList, Message,
)
from pawpost.core.database import get_db
from pawpost.core.guard import authorize
from pawpost.stores.postStore import PostStore

router = APIRouter(prefix="/api", tags=["Posts"])

PostId = Annotated[int, Path(ge=1, le=MAX_ID)]


@router.get("/health", response_class=PlainTextResponse)
def health():
    return "OK"


@router.get("/posts", response_model=PostList)
def list_posts(db: Session = Depends(get_db)):
    posts = PostStore(db).list_all()
    return {"posts": [PostResponse.model_validate(p) for p in posts]}


@router.post("/posts", response_model=PostMessage, status_code=status.HTTP_201_CREATED)
def create_post(body: PostCreate, db: Session = Depends(get_db)):
    db_post = PostStore(db).create(body.title, body.content, body.user_id)
    return {"message": "Post created", "post": PostResponse.model_validate(db_post)}


@router.get("/posts/{post_id}", response_model=PostEnvelope)
def read_post(post_id: PostId, db: Session = Depends(get_db)):
    post = PostStore(db).get_by_id(post_id)
    return {"post": PostResponse.model_validate(post)}


@router.put("/posts/{post_id}", response_model=PostMessage)
def update_post(post_id: PostId, body: PostUpdate, db: Session = Depends(get_db)):
    store = PostStore(db)
    post = store.get_by_id(post_id)
    authorize(post, body.user_id)

    post = store.update(post_id, body.title, body.content, owner_id=body.user_id)
    return {"message": "Post updated", "post": PostResponse.model_validate(post)}


@router.delete("/posts/{post_id}", response_model=Message)
def delete_post(post_id: PostId, body: PostDelete, db: Session = Depends(get_db)):
    store = PostStore(db)
    post = store.get_by_id(post_id)
    authorize(post, body.user_id)

    store.delete(post_id, owner_id=body.user_id)
    return {"message": "Post deleted"}

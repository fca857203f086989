"""
Comment API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.get("/api/articles/{article_id}/comments")
async def get_article_comments(
    article_id: int,
    database: Database = Depends(get_db),
) -> dict:
    """
    List an article's comments, newest first.
    """
    comments = await service.list_comments(database, article_id)
    return {"comments": comments}


@router.post("/api/articles/{article_id}/comments", status_code=status.HTTP_201_CREATED)
async def post_article_comment(
    article_id: int,
    request: schemas.NewCommentRequest,
    database: Database = Depends(get_db),
) -> dict:
    """
    Add a comment to an article.
    """
    comment = await service.add_comment(
        database,
        article_id,
        username=request.username,
        body=request.body,
    )
    return {"comment": comment}


@router.delete("/api/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int,
    database: Database = Depends(get_db),
) -> Response:
    """
    Delete a comment; responds 204 with no body.
    """
    await service.remove_comment(database, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

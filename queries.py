from typing import List
from database import get_db
from errors import NotFound
from schemas import Post, PostWithStats, CommentWithStats

# Aggregates are correlated subqueries evaluated per row; there are no
# denormalized counters to keep in sync.
POST_STATS_SELECT = """
    SELECT
        posts.id,
        posts.user_id,
        posts.title,
        posts.content,
        posts.tag,
        posts.created_at,
        (SELECT COUNT(*) FROM likes WHERE likes.post_id = posts.id) AS like_count,
        (SELECT COUNT(*) FROM comments WHERE comments.post_id = posts.id) AS comment_count,
        EXISTS (
            SELECT 1 FROM likes WHERE likes.post_id = posts.id AND likes.user_id = ?
        ) AS liked_by_user
    FROM posts
"""

COMMENT_STATS_SELECT = """
    SELECT
        comments.id,
        comments.post_id,
        comments.user_id,
        comments.content,
        comments.created_at,
        (SELECT COUNT(*) FROM comment_likes WHERE comment_likes.comment_id = comments.id) AS like_count,
        EXISTS (
            SELECT 1 FROM comment_likes
            WHERE comment_likes.comment_id = comments.id
            AND comment_likes.user_id = ?
        ) AS liked_by_user
    FROM comments
"""

def _post_with_stats(row) -> PostWithStats:
    return PostWithStats(
        id=row[0],
        user_id=row[1],
        title=row[2],
        content=row[3],
        tag=row[4],
        created_at=row[5],
        like_count=row[6],
        comment_count=row[7],
        liked_by_user=bool(row[8])
    )

def _comment_with_stats(row) -> CommentWithStats:
    return CommentWithStats(
        id=row[0],
        post_id=row[1],
        user_id=row[2],
        content=row[3],
        created_at=row[4],
        like_count=row[5],
        liked_by_user=bool(row[6])
    )

def list_posts() -> List[Post]:
    """All posts, newest first, without aggregates"""
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute("""
            SELECT id, user_id, title, content, tag, created_at
            FROM posts
            ORDER BY created_at DESC, id DESC
        """)
        rows = cursor.fetchall()
    return [
        Post(id=r[0], user_id=r[1], title=r[2], content=r[3], tag=r[4], created_at=r[5])
        for r in rows
    ]

def list_posts_with_stats(current_user_id: int) -> List[PostWithStats]:
    """All posts, newest first, each with like/comment counts and the
    current user's like flag."""
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(POST_STATS_SELECT + " ORDER BY posts.created_at DESC, posts.id DESC", (current_user_id,))
        rows = cursor.fetchall()
    return [_post_with_stats(r) for r in rows]

def get_post_with_stats(post_id: int, current_user_id: int) -> PostWithStats:
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(POST_STATS_SELECT + " WHERE posts.id = ?", (current_user_id, post_id))
        row = cursor.fetchone()
    if not row:
        raise NotFound("Post not found")
    return _post_with_stats(row)

def list_comments_for_post(post_id: int, current_user_id: int) -> List[CommentWithStats]:
    """Replies to a post in posting order (oldest first)."""
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(
            COMMENT_STATS_SELECT + " WHERE comments.post_id = ? ORDER BY comments.created_at ASC, comments.id ASC",
            (current_user_id, post_id)
        )
        rows = cursor.fetchall()
    return [_comment_with_stats(r) for r in rows]

def is_post_liked_by_user(post_id: int, user_id: int) -> bool:
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT 1 FROM likes WHERE post_id = ? AND user_id = ?", (post_id, user_id))
        return cursor.fetchone() is not None

def get_post_like_count(post_id: int) -> int:
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT COUNT(*) FROM likes WHERE post_id = ?", (post_id,))
        return cursor.fetchone()[0]

def is_comment_liked_by_user(comment_id: int, user_id: int) -> bool:
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT 1 FROM comment_likes WHERE comment_id = ? AND user_id = ?", (comment_id, user_id))
        return cursor.fetchone() is not None

def get_comment_like_count(comment_id: int) -> int:
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT COUNT(*) FROM comment_likes WHERE comment_id = ?", (comment_id,))
        return cursor.fetchone()[0]

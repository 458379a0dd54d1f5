import logging
from database import get_db
from errors import NotFound
from schemas.shared import DEFAULT_POST_TAG
from utils.db_helpers import require_post, require_comment

logger = logging.getLogger(__name__)

# ───────────────────────────────  POSTS  ──────────────────────────────────
def create_post(user_id: int, title: str, content: str, tag: str = DEFAULT_POST_TAG) -> int:
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(
            "INSERT INTO posts (user_id, title, content, tag) VALUES (?, ?, ?, ?)",
            (user_id, title, content, tag)
        )
        post_id = cursor.lastrowid
    logger.debug("Created post %s for user %s", post_id, user_id)
    return post_id

def update_post(post_id: int, title: str, content: str, tag: str) -> None:
    """Replace title, content and tag. id and created_at never change."""
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(
            "UPDATE posts SET title = ?, content = ?, tag = ? WHERE id = ?",
            (title, content, tag, post_id)
        )
        if cursor.rowcount == 0:
            raise NotFound("Post not found")
    logger.debug("Updated post %s", post_id)

def delete_post(post_id: int) -> None:
    """Delete a post; comments, likes and comment likes go with it (ON DELETE CASCADE)."""
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute("DELETE FROM posts WHERE id = ?", (post_id,))
        if cursor.rowcount == 0:
            raise NotFound("Post not found")
    logger.debug("Deleted post %s", post_id)

def like_post(post_id: int, user_id: int) -> bool:
    """Like a post once. Returns False if the user already liked it."""
    with get_db() as conn:
        cursor = conn.cursor()
        require_post(cursor, post_id)
        # Check if user already liked
        cursor.execute("SELECT 1 FROM likes WHERE post_id = ? AND user_id = ?", (post_id, user_id))
        if cursor.fetchone():
            return False
        cursor.execute("INSERT INTO likes (post_id, user_id) VALUES (?, ?)", (post_id, user_id))
    logger.debug("User %s liked post %s", user_id, post_id)
    return True

def unlike_post(post_id: int, user_id: int) -> bool:
    """Remove the user's like. Returns False when there was nothing to remove."""
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute("DELETE FROM likes WHERE post_id = ? AND user_id = ?", (post_id, user_id))
        removed = cursor.rowcount > 0
    if removed:
        logger.debug("User %s unliked post %s", user_id, post_id)
    return removed

# ──────────────────────────────  COMMENTS  ────────────────────────────────
def create_comment(post_id: int, content: str, user_id: int) -> int:
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(
            "INSERT INTO comments (post_id, user_id, content) VALUES (?, ?, ?)",
            (post_id, user_id, content)
        )
        comment_id = cursor.lastrowid
    logger.debug("Created comment %s on post %s", comment_id, post_id)
    return comment_id

def update_comment(comment_id: int, new_content: str) -> None:
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute("UPDATE comments SET content = ? WHERE id = ?", (new_content, comment_id))
        if cursor.rowcount == 0:
            raise NotFound("Comment not found")
    logger.debug("Updated comment %s", comment_id)

def delete_comment(comment_id: int) -> None:
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute("DELETE FROM comments WHERE id = ?", (comment_id,))
        if cursor.rowcount == 0:
            raise NotFound("Comment not found")
    logger.debug("Deleted comment %s", comment_id)

def like_comment(comment_id: int, user_id: int) -> bool:
    with get_db() as conn:
        cursor = conn.cursor()
        require_comment(cursor, comment_id)
        cursor.execute("SELECT 1 FROM comment_likes WHERE comment_id = ? AND user_id = ?", (comment_id, user_id))
        if cursor.fetchone():
            return False
        cursor.execute("INSERT INTO comment_likes (comment_id, user_id) VALUES (?, ?)", (comment_id, user_id))
    logger.debug("User %s liked comment %s", user_id, comment_id)
    return True

def unlike_comment(comment_id: int, user_id: int) -> bool:
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute("DELETE FROM comment_likes WHERE comment_id = ? AND user_id = ?", (comment_id, user_id))
        removed = cursor.rowcount > 0
    if removed:
        logger.debug("User %s unliked comment %s", user_id, comment_id)
    return removed

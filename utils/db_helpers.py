from errors import NotFound

def post_exists(cursor, post_id: int) -> bool:
    cursor.execute("SELECT 1 FROM posts WHERE id = ?", (post_id,))
    return cursor.fetchone() is not None

def comment_exists(cursor, comment_id: int) -> bool:
    cursor.execute("SELECT 1 FROM comments WHERE id = ?", (comment_id,))
    return cursor.fetchone() is not None

def require_post(cursor, post_id: int):
    """Raise NotFound unless the post row exists (shares the caller's transaction)"""
    if not post_exists(cursor, post_id):
        raise NotFound("Post not found")

def require_comment(cursor, comment_id: int):
    if not comment_exists(cursor, comment_id):
        raise NotFound("Comment not found")

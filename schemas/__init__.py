# Schemas package 
from .shared import PostTag, DEFAULT_POST_TAG
from .posts import Post, PostWithStats, Comment, CommentWithStats, PostDraft, CommentDraft

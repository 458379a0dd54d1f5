from enum import Enum

class PostTag(str, Enum):
    GENERAL = 'General'
    QUESTION = 'Question'
    REQUEST = 'Request'
    NSFW = 'Nsfw'
    SPOILER = 'Spoiler'

DEFAULT_POST_TAG = PostTag.GENERAL.value

def allowed_post_tags():
    return [tag.value for tag in PostTag]

from slugify import slugify


def make_user_prefix(prefix: str, username: str) -> str:
    user = slugify(username)
    if not user:
        raise ValueError("Username cannot be empty after sanitization.")
    return f"{prefix.strip('/')}/{user}/"


def make_question_key(prefix: str, username: str, question_id: str) -> str:
    return f"{make_user_prefix(prefix, username)}{question_id}.json"

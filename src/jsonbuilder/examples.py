"""
Example domain objects for demos and tests.

A small blog model: an Article written by an Author, with Comments.
Article declares two selectors; Author declares one; Comment none.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from jsonbuilder.named_fields import NamedFields, json_named_field, json_named_fields


@json_named_field("public", ["name", "email"])
class Author(BaseModel):
    name: str
    email: str
    password_hash: str = Field(default="", exclude=True)


class Comment(BaseModel):
    author: str
    text: str


@json_named_fields(
    NamedFields("summary", ["id", "title", "author"]),
    NamedFields("listing", ["id", "title", "published_at"]),
)
class Article(BaseModel):
    id: int
    title: str
    body: str
    author: Author
    comments: List[Comment] = Field(default_factory=list)
    published_at: Optional[datetime] = None


def build_example_article(article_id: int = 1) -> Article:
    author = Author(name="Ada", email="ada@example.org", password_hash="x1y2z3")
    return Article(
        id=article_id,
        title="Named selectors",
        body="Only some fields are needed on a listing page.",
        author=author,
        comments=[
            Comment(author="Bob", text="Nice."),
            Comment(author="Eve", text="What about nested fields?"),
        ],
        published_at=datetime(2024, 5, 1, 9, 30),
    )

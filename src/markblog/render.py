"""HTML views for the blog pages.

Every view returns a complete page built by :meth:`PageRenderer.layout`.
Rendering is plain string interpolation; values are escaped with
:func:`html.escape` unless the renderer is created with ``escape_html=False``.
Path segments inside links are always URL-quoted.
"""

from __future__ import annotations

import html
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote

STYLESHEET = """
    body {
      padding: 80px;
      font: 16px Helvetica, Arial;
    }

    h1 {
      font-size: 2em;
    }

    h2 {
      font-size: 1.2em;
    }

    #posts {
      margin: 0;
      padding: 0;
    }

    #posts li {
      margin: 40px 0;
      padding: 0;
      padding-bottom: 20px;
      border-bottom: 1px solid #eee;
      list-style: none;
    }

    #posts li:last-child {
      border-bottom: none;
    }

    textarea {
      width: 500px;
      height: 300px;
    }

    input[type=text],
    textarea {
      border: 1px solid #eee;
      border-top-color: #ddd;
      border-left-color: #ddd;
      border-radius: 2px;
      padding: 15px;
      font-size: .8em;
    }

    input[type=text] {
      width: 500px;
    }
"""


class PageRenderer:
    """Turn post records into HTML pages."""

    def __init__(self, *, escape_html: bool = True) -> None:
        self.escape_html = escape_html

    def _text(self, value: Any) -> str:
        text = "" if value is None else str(value)
        return html.escape(text) if self.escape_html else text

    def _path(self, value: Any) -> str:
        """Return a value as a single URL path segment."""
        return quote("" if value is None else str(value), safe="")

    def layout(self, title: Any, content: str) -> str:
        """Wrap a content fragment in the shared page skeleton."""
        return f"""
<html>
<head>
  <title>{self._text(title)}</title>
  <style>{STYLESHEET}  </style>
</head>
<body>
  <section id="content">
    {content}
  </section>
</body>
</html>
"""

    def user_list(self, records: Sequence[Mapping[str, Any]]) -> str:
        items = []
        for record in records:
            user = record.get("user")
            items.append(f'<li><a href="/{self._path(user)}/">{self._text(user)}</a></li>')
        return self.layout("User List", "<ol>{}</ol>".format("\n".join(items)))

    def title_list(self, user: str, posts: Sequence[Mapping[str, Any]]) -> str:
        """Render a user's posts with a count and a link to the submission form."""
        owner = self._path(user)
        items = []
        for post in posts:
            title = self._text(post.get("title"))
            post_id = self._path(post.get("id"))
            items.append(f"""
    <li>
      <h2>{title}</h2>
      <p><a href="/{owner}/post/{post_id}">Read post</a></p>
    </li>""")
        listing = "\n".join(items)
        content = f"""
  <h1>Posts</h1>
  <p>You have <strong>{len(posts)}</strong> posts!</p>
  <p><a href="/{owner}/post/new">Create a Post</a></p>
  <ul id="posts">
    {listing}
  </ul>
  <a href="/"><p><input type="submit" value="back"></p></a>
"""
        return self.layout("Posts", content)

    def new_post(self, user: str) -> str:
        owner = self._path(user)
        return self.layout(
            "New Post",
            f"""
  <h1>New Post</h1>
  <p>Create a new post.</p>
  <form action="/{owner}/post" method="post">
    <p><input type="text" placeholder="Title" name="title"></p>
    <p><textarea placeholder="Contents" name="body"></textarea></p>
    <p><input type="submit" value="create"></p>
  </form>
""",
        )

    def show_post(self, user: str, post: Mapping[str, Any]) -> str:
        title = self._text(post.get("title"))
        body = self._text(post.get("body"))
        owner = self._path(user)
        return self.layout(
            post.get("title"),
            f"""
    <h1>{title}</h1>
    <p>{body}</p>
    <a href="/{owner}/"><p><input type="submit" value="back"></p></a>
""",
        )

"""Build a page with plain Python calls: conditionals and loops, no template."""

from tagsmith import DOCTYPE, Builder

title = "Posts"
posts = ["Post0", "Post1"]

b = Builder(DOCTYPE)
E = b.element


def head() -> None:
    E("meta", {"charset": "utf-8"})
    E("title", None, title if title else "untitled")


def body() -> None:
    E("h1", {"class": "title"}, title)
    for post in posts:
        E("h2", None, post)


E("html", {"lang": "en"}, lambda: (E("head", None, head), E("body", None, body)))
print(b)

import textwrap

from blogbuild.schemas.post import CONTENT_MODELS


class FakeRepo:
    """
    Minimal content store stand-in keyed by content id.
    Ids are listed per category in insertion order.
    """

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.reads = []

    def list_files(self, category: str):
        return [cid for cid in self.files if cid.startswith(f"{category}/")]

    def read(self, content_id: str) -> str:
        self.reads.append(content_id)
        return textwrap.dedent(self.files[content_id]).lstrip()


def make_post(slug, pub_date, tags=None, category="blog", **fields):
    """Build an entry without going through front matter."""
    model = CONTENT_MODELS[category]
    return model(
        id=fields.pop("id", f"{category}/{slug}.md"),
        slug=slug,
        title=fields.pop("title", slug.replace("-", " ").title()),
        description=fields.pop("description", f"About {slug}"),
        pubDate=pub_date,
        tags=tags or [],
        **fields,
    )


def post_markdown(title="Post", pub_date="2024-01-01", tags=None, extra="", body="Body."):
    lines = ["---", f"title: {title}", "description: A post", f"pubDate: {pub_date}"]
    if tags is not None:
        lines.append(f"tags: {tags}")
    if extra:
        lines.append(extra)
    lines += ["---", body]
    return "\n".join(lines) + "\n"

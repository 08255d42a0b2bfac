class BuildError(Exception):
    """Base class for anything that must stop a site build."""


class ContentError(BuildError):
    """A content file cannot be turned into an entry."""

    def __init__(self, content_id: str, message: str):
        self.content_id = content_id
        super().__init__(f"{content_id}: {message}")


class MissingFieldError(ContentError):
    def __init__(self, content_id: str, field: str):
        self.field = field
        super().__init__(content_id, f"missing required front-matter field '{field}'")


class MalformedTagsError(ContentError):
    def __init__(self, content_id: str, value):
        self.value = value
        super().__init__(
            content_id, f"tags must be a list of non-empty strings, got {value!r}"
        )


class InvalidFrontMatterError(ContentError):
    pass


class UnknownCategoryError(ContentError):
    def __init__(self, content_id: str, category: str):
        self.category = category
        super().__init__(content_id, f"unknown content category '{category}'")


class RouteCollisionError(BuildError):
    def __init__(self, path: str, first: str, second: str):
        self.path = path
        self.first = first
        self.second = second
        super().__init__(f"Route {path} is produced by both {first} and {second}")


class InvalidTagError(BuildError):
    def __init__(self, tag):
        self.tag = tag
        super().__init__(f"Tag {tag!r} cannot be used in a route")

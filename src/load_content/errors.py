"""Errors raised while loading local content."""


class ContentNotFoundError(Exception):
    """No document exists for the requested slug."""

    def __init__(self, collection_dir, slug: str):
        self.collection_dir = collection_dir
        self.slug = slug
        super().__init__(f"No content for slug '{slug}' in {collection_dir}")


class ContentParseError(Exception):
    """A document's front-matter is malformed or incomplete."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")

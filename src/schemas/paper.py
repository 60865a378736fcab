"""Paper metadata schema.

Lists arrive from the submission form as comma-joined strings and are kept in
that form; ``split_list`` produces the trimmed, non-empty entries.
"""

from pydantic import BaseModel


def split_list(value: str | None) -> list[str]:
    """Split a comma-joined string into trimmed, non-empty entries.

    Examples:
        >>> split_list("C61, , D24,")
        ['C61', 'D24']
    """
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


class PaperMetadata(BaseModel):
    """Metadata of a submitted working paper.

    Attributes:
        title: Paper title
        authors: Comma-joined author names
        abstract: Abstract text (may be empty)
        keywords: Comma-joined keywords
        jel: Comma-joined JEL classification codes
    """

    title: str
    authors: str = ""
    abstract: str = ""
    keywords: str = ""
    jel: str = ""

    model_config = {"frozen": True}

    @property
    def author_list(self) -> list[str]:
        return split_list(self.authors)

    @property
    def keyword_list(self) -> list[str]:
        return split_list(self.keywords)

    @property
    def jel_list(self) -> list[str]:
        return split_list(self.jel)

"""Tag entity for labeling posts."""

from juicebox.domain.model.common import DomainModel
from juicebox.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity for labeling posts.

    Tags are shared by all posts and addressed by name: a name maps to at
    most one tag, and resolving an existing name reuses its row.
    """

    id: TagId
    name: TagName

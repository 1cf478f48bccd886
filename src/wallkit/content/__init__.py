"""Content components: code blocks, Markdown and tag clouds."""

from wallkit.content.code import Code
from wallkit.content.markdown import Markdown
from wallkit.content.tag_cloud import TagCloud, tag_size

__all__ = ["Code", "Markdown", "TagCloud", "tag_size"]

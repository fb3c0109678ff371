from .htmlnode import (
    DOCTYPE,
    Node,
    Tag,
    document,
    fragment,
    render,
    renderattributes,
)

__all__ = [
    "DOCTYPE",
    "Node",
    "Tag",
    "document",
    "fragment",
    "render",
    "renderattributes",
]

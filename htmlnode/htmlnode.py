"""
htmlnode

A light-weight tree of html nodes that renders to a string. Handy for
formatting logs, reports and other small pieces of data as html.

Content is not escaped. Values and attribute keys/values containing <, >, &
or " will produce malformed html; supplying safe content is up to the
caller.

Only the tags in Tag can be rendered. A node with children ignores its
value when rendered.
"""
from __future__ import annotations
import logging
from enum import Enum
from typing import Optional, List, Tuple, Iterable, Mapping, Union

logger = logging.getLogger(__name__)

DOCTYPE = "<!DOCTYPE html>"


class Tag(Enum):
    """
    Tag - the supported html tags. Each renders as its lowercase name
    """

    a = "a"
    b = "b"
    body = "body"
    br = "br"
    div = "div"
    em = "em"
    h1 = "h1"
    h2 = "h2"
    h3 = "h3"
    h4 = "h4"
    h5 = "h5"
    h6 = "h6"
    head = "head"
    header = "header"
    hr = "hr"
    html = "html"
    i = "i"
    li = "li"
    meta = "meta"
    ol = "ol"
    p = "p"
    span = "span"
    strong = "strong"
    style = "style"
    sub = "sub"
    sup = "sup"
    table = "table"
    tbody = "tbody"
    td = "td"
    text = "text"
    tfoot = "tfoot"
    th = "th"
    thead = "thead"
    title = "title"
    tr = "tr"
    u = "u"
    ul = "ul"

    def __str__(self) -> str:
        return self.value


Attributes = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class Node:
    """
    An html node. Has a tag, optionally attributes, and either children or a
    text value
    """

    def __init__(
        self,
        element: Union[Tag, str],
        children: Optional[Iterable[Node]] = None,
        value: str = "",
        attributes: Optional[Attributes] = None,
    ):
        """
        element: Tag of this node. A tag name string is also accepted;
            names outside of Tag raise ValueError
        children: child nodes, rendered in order. Copied into a new list
        value: text of a leaf node. Only rendered when there are no children
        attributes: html attributes, like {"class": "info"}. Either a mapping
            or an iterable of (name, value) pairs. Rendered in the order
            given
        """
        self._element = element if isinstance(element, Tag) else Tag(element)
        self._value = value
        self._attributes: Optional[dict[str, str]] = None
        if attributes is not None:
            self._attributes = dict(attributes)
        self.children: List[Node] = list(children) if children else []

    @classmethod
    def container(
        cls,
        element: Union[Tag, str],
        children: Iterable[Node],
        attributes: Optional[Attributes] = None,
    ) -> Node:
        """
        container - create a node holding child nodes
        """
        return cls(element, children=children, attributes=attributes)

    @classmethod
    def leaf(
        cls,
        element: Union[Tag, str],
        value: str = "",
        attributes: Optional[Attributes] = None,
    ) -> Node:
        """
        leaf - create a node holding a text value
        """
        return cls(element, value=value, attributes=attributes)

    @property
    def element(self) -> Tag:
        return self._element

    @property
    def value(self) -> str:
        return self._value

    @property
    def attributes(self) -> Optional[dict[str, str]]:
        # a copy, attributes are fixed after construction
        if self._attributes is None:
            return None
        return dict(self._attributes)

    def appendChild(self, child: Node) -> Node:
        """
        child = node to add as the last child of this node

        returns child (for storing children that are created directly in the
            arguments)

        Raises ValueError if child is this node or contains it, since the
        tree could then never finish rendering
        """
        if child is self or self in child.descendants():
            raise ValueError(
                f"Cannot append a node to itself or its descendants. Tag: {self._element}"
            )
        self.children.append(child)
        return child

    def descendants(self) -> List[Node]:
        """
        descendants - return every node below this one, depth first
        """
        result: List[Node] = []
        for c in self.children:
            result.append(c)
            result.extend(c.descendants())
        return result

    def renderlist(self) -> list[str]:
        """
        renderlist - render this node and recursively, all child nodes

        returns a list of strings that can be joined to create the rendered html
        (or can be appended to parent's html list)
        """
        tag = self._element.value
        dest: list[str] = ["<" + tag, renderattributes(self._attributes)]

        if self.children:
            dest.append(">")
            for c in self.children:
                dest.extend(c.renderlist())
            dest.append(f"</{tag}>\n")
        elif self._value:
            dest.append(f">{self._value}</{tag}>\n")
        else:
            dest.append("/>\n")

        return dest

    def render(self) -> str:
        """
        render - render this node to a string of html
        """
        return "".join(self.renderlist())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Node({self._element.value!r}, children={len(self.children)}, "
            f"value={self._value!r}, attributes={self._attributes!r})"
        )


def render(node: Node) -> str:
    """
    render - render a node and its children to a string of html. Each
    closed or self closed tag is followed by a newline
    """
    return node.render()


def renderattributes(attributes: Optional[Mapping[str, str]]) -> str:
    """
    renderattributes - format attributes as ' key="value"' pairs, in the
    mapping's order. None or an empty mapping gives ""
    """
    if not attributes:
        return ""
    return "".join(f' {k}="{v}"' for k, v in attributes.items())


def document(nodes: Iterable[Node], style: str = "") -> str:
    """
    document - render a complete html document: doctype, a head holding the
    stylesheet and a body holding the supplied nodes

    nodes: nodes to place inside of the body tag
    style: raw css for the head's style tag (not escaped)
    """
    nodes = list(nodes)
    html = Node.container(
        Tag.html,
        [
            Node.container(Tag.head, [Node.leaf(Tag.style, style)]),
            Node.container(Tag.body, nodes),
        ],
    )
    result = DOCTYPE + "\n" + html.render().strip()
    logger.debug("rendered document: %d body nodes, %d chars", len(nodes), len(result))
    return result


def fragment(nodes: Iterable[Node]) -> str:
    """
    fragment - render nodes as-is, without adding doctype, head, body etc
    """
    dest: list[str] = []
    count = 0
    for node in nodes:
        dest.extend(node.renderlist())
        count += 1
    result = "".join(dest).strip()
    logger.debug("rendered fragment: %d nodes, %d chars", count, len(result))
    return result


if __name__ == "__main__":
    table = Node.container(
        Tag.table,
        [
            Node.container(Tag.tr, [Node.leaf(Tag.th, "level"), Node.leaf(Tag.th, "message")]),
            Node.container(Tag.tr, [Node.leaf(Tag.td, "info"), Node.leaf(Tag.td, "started")]),
        ],
        attributes={"class": "log"},
    )

    print(document([Node.leaf(Tag.h1, "Log"), table], style="td { padding: 2px; }"))

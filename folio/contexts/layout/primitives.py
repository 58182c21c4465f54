"""
Layout Primitives

Shared node builders used by every template: contact items, inline and stacked contact
blocks, section headings, bulleted entries and simple list entries. Builders are pure and
take explicit style dicts; templates decide the styles, primitives decide the structure.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from folio.contexts.content.resume_data_structure import BulletItem, ContactInfo
from folio.contexts.content.rich_text import extract_formatted_text, extract_plain_text
from folio.contexts.layout.document_tree import Box, Link, Node, Style, Text
from folio.utils.text_processing import clean_github, clean_linkedin, clean_url, ensure_scheme

# Contact field orders used by the templates
LOCATION_FIRST = ("location", "email", "phone", "linkedin", "github", "portfolio")
EMAIL_FIRST = ("email", "phone", "location", "linkedin", "github", "portfolio")


@dataclass(frozen=True)
class ContactItem:
    """
    One displayable contact value.

    Attributes:
        kind: Contact field name ("email", "linkedin", ...)
        text: Display text
        href: Link target, None for plain text items
    """

    kind: str
    text: str
    href: Optional[str] = None


def contact_items(contact: ContactInfo, order: Sequence[str] = LOCATION_FIRST) -> List[ContactItem]:
    """
    Build display items for the non-empty contact fields, in the given order.

    LinkedIn and GitHub values are reduced to the username; portfolio URLs lose their scheme
    for display; email links use mailto:.

    Example:
        >>> contact_items(ContactInfo(email="a@b.co", github="https://github.com/ab/"))
        [ContactItem(kind='email', text='a@b.co', href='mailto:a@b.co'),
         ContactItem(kind='github', text='github.com/ab', href='https://github.com/ab')]
    """
    items = []
    for kind in order:
        value = (getattr(contact, kind, "") or "").strip()
        if not value:
            continue

        if kind == "email":
            items.append(ContactItem(kind, value, f"mailto:{value}"))
        elif kind == "linkedin":
            username = clean_linkedin(value)
            items.append(
                ContactItem(kind, f"linkedin.com/in/{username}", f"https://linkedin.com/in/{username}")
            )
        elif kind == "github":
            username = clean_github(value)
            items.append(ContactItem(kind, f"github.com/{username}", f"https://github.com/{username}"))
        elif kind == "portfolio":
            display = clean_url(value)
            items.append(ContactItem(kind, display, ensure_scheme(display)))
        else:
            items.append(ContactItem(kind, value))
    return items


def contact_node(item: ContactItem, text_style: Style, link_style: Style) -> Node:
    if item.href:
        return Link(text=item.text, href=item.href, style=dict(link_style), role="contact-item")
    return Text(text=item.text, style=dict(text_style), role="contact-item")


def inline_contact_row(
    items: Sequence[ContactItem],
    separator: str,
    text_style: Style,
    link_style: Style,
    separator_style: Style,
    row_style: Optional[Style] = None,
) -> Optional[Box]:
    """Contact items on one wrapping row, separated by a glyph. None when there are no items."""
    if not items:
        return None

    children: List[Node] = []
    for index, item in enumerate(items):
        if index > 0:
            children.append(Text(text=separator, style=dict(separator_style), role="separator"))
        children.append(contact_node(item, text_style, link_style))

    style = {"flex_direction": "row", "flex_wrap": "wrap", "align_items": "center"}
    style.update(row_style or {})
    return Box(children=children, style=style, role="contact-row")


def stacked_contact_items(
    items: Sequence[ContactItem],
    text_style: Style,
    link_style: Style,
    column_style: Optional[Style] = None,
) -> Optional[Box]:
    """Contact items stacked one per line (sidebars and header panels)."""
    if not items:
        return None
    children = [contact_node(item, text_style, link_style) for item in items]
    style = {"flex_direction": "column"}
    style.update(column_style or {})
    return Box(children=children, style=style, role="contact-row")


def header_block(
    name: str,
    target_title: str,
    name_style: Style,
    title_style: Style,
    contact_block: Optional[Box],
    style: Style,
) -> Box:
    """
    Header with the name, the target title directly under it, then the contact block.

    Empty parts are omitted.
    """
    children: List[Node] = []
    if name:
        children.append(Text(text=name, style=dict(name_style), role="name"))
    if target_title:
        children.append(Text(text=target_title, style=dict(title_style), role="target-title"))
    if contact_block is not None:
        children.append(contact_block)
    return Box(children=children, style=dict(style), role="header")


def split_header_block(
    name: str,
    target_title: str,
    name_style: Style,
    title_style: Style,
    side_block: Optional[Box],
    style: Style,
    content_style: Optional[Style] = None,
) -> Box:
    """
    Header with name and title grouped on one side and a contact panel on the other.

    The panel is placed after the name group; style decides the direction (row for a
    side-by-side band).
    """
    content: List[Node] = []
    if name:
        content.append(Text(text=name, style=dict(name_style), role="name"))
    if target_title:
        content.append(Text(text=target_title, style=dict(title_style), role="target-title"))

    children: List[Node] = [
        Box(children=content, style=dict(content_style or {"flex": 1}), role="header-content")
    ]
    if side_block is not None:
        children.append(side_block)
    return Box(children=children, style=dict(style), role="header")


def section_heading(
    title: str,
    style: Style,
    section_key: str,
    accent_bar: Optional[Style] = None,
    rule: Optional[Style] = None,
) -> Node:
    """
    Section heading text, optionally decorated.

    Args:
        title: Heading text
        style: Text style (heading decoration already applied)
        section_key: Owning section key
        accent_bar: Style of a small filled box drawn left of the heading
        rule: Style of a horizontal line filling the space right of the heading
    """
    heading = Text(text=title, style=dict(style), role="section-heading", section_key=section_key)
    if accent_bar is None and rule is None:
        return heading

    children: List[Node] = [heading]
    if accent_bar is not None:
        children.insert(0, Box(style=dict(accent_bar), role="decoration", section_key=section_key))
    if rule is not None:
        children.append(Box(style=dict(rule), role="decoration", section_key=section_key))
    return Box(
        children=children,
        style={"flex_direction": "row", "align_items": "center"},
        role="section-heading-row",
        section_key=section_key,
    )


def section_block(
    section_key: str,
    heading: Optional[Node],
    children: Iterable[Node],
    style: Style,
) -> Box:
    """Section container: heading first, then body nodes."""
    nodes: List[Node] = [heading] if heading is not None else []
    nodes.extend(children)
    return Box(children=nodes, style=dict(style), role="section", section_key=section_key)


def bullet_list(
    bullets: Sequence[BulletItem],
    marker: str,
    marker_style: Style,
    text_style: Style,
    list_style: Style,
    bullet_gap: float,
    section_key: Optional[str] = None,
) -> Optional[Box]:
    """
    Bullet rows (marker + text). Bullets without text are skipped; None when nothing remains.
    """
    rows: List[Node] = []
    for bullet in bullets:
        text = extract_plain_text(bullet.content).strip()
        if not text:
            continue
        rows.append(
            Box(
                children=[
                    Text(text=marker, style=dict(marker_style), role="bullet-marker"),
                    Text(
                        text=text,
                        style=dict(text_style),
                        role="bullet-text",
                        section_key=section_key,
                        segments=extract_formatted_text(bullet.content) or None,
                    ),
                ],
                style={"flex_direction": "row", "margin_bottom": bullet_gap},
                role="bullet",
                section_key=section_key,
            )
        )
    if not rows:
        return None
    return Box(children=rows, style=dict(list_style), role="bullet-list", section_key=section_key)


def title_line(
    parts: Sequence[tuple],
    style: Optional[Style] = None,
    section_key: Optional[str] = None,
) -> Optional[Box]:
    """
    Inline run of (text, style, role) parts; empty texts are dropped.

    Used for "Position at Company | Location" style lines.
    """
    children = [
        Text(text=text, style=dict(part_style), role=role, section_key=section_key)
        for text, part_style, role in parts
        if text
    ]
    if not children:
        return None
    line_style = {"flex_direction": "row", "flex_wrap": "wrap"}
    line_style.update(style or {})
    return Box(children=children, style=line_style, role="entry-title-line", section_key=section_key)


def entry_header(
    left: Optional[Node],
    date_text: str,
    date_style: Style,
    section_key: Optional[str] = None,
    stacked: bool = False,
) -> Optional[Box]:
    """
    Entry header: title line on the left and the date on the right (or below when stacked).
    """
    children: List[Node] = [left] if left is not None else []
    if date_text:
        children.append(
            Text(text=date_text, style=dict(date_style), role="entry-date", section_key=section_key)
        )
    if not children:
        return None
    if stacked:
        style = {"flex_direction": "column", "margin_bottom": 2}
    else:
        style = {
            "flex_direction": "row",
            "justify_content": "space-between",
            "align_items": "flex-start",
            "margin_bottom": 2,
        }
    return Box(children=children, style=style, role="entry-header", section_key=section_key)


def entry_block(
    section_key: str,
    children: Iterable[Optional[Node]],
    style: Style,
) -> Box:
    """
    Keep-together entry container (one job, degree, project, ...); None children are dropped.
    """
    return Box(
        children=[child for child in children if child is not None],
        style=dict(style),
        role="entry",
        section_key=section_key,
        keep_together=True,
    )


def paragraph(text: str, style: Style, role: str, section_key: Optional[str] = None) -> Optional[Text]:
    if not text:
        return None
    return Text(text=text, style=dict(style), role=role, section_key=section_key)


def simple_list_entry(
    section_key: str,
    title: str,
    subtitle: str,
    date_text: str,
    description: str,
    styles: dict,
    link: Optional[ContactItem] = None,
    stacked: bool = False,
    subtitle_inline: bool = True,
) -> Box:
    """
    Entry block for list-type sections without bullets (certifications, awards, publications).

    Args:
        styles: Mapping with "title", "subtitle", "date", "description", "link" and "entry"
                style dicts
        subtitle_inline: Render " - {subtitle}" after the title instead of on its own line
    """
    if subtitle_inline:
        left = title_line(
            [
                (title, styles["title"], "entry-title"),
                (f" - {subtitle}" if subtitle and title else subtitle, styles["subtitle"], "entry-subtitle"),
            ],
            section_key=section_key,
        )
        subtitle_node = None
    else:
        left = title_line([(title, styles["title"], "entry-title")], section_key=section_key)
        subtitle_node = paragraph(subtitle, styles["subtitle"], "entry-subtitle", section_key)

    link_node = None
    if link is not None:
        link_node = Link(
            text=link.text,
            href=link.href,
            style=dict(styles["link"]),
            role="entry-link",
            section_key=section_key,
        )

    return entry_block(
        section_key,
        [
            entry_header(left, date_text, styles["date"], section_key, stacked=stacked),
            subtitle_node,
            paragraph(description, styles["description"], "entry-description", section_key),
            link_node,
        ],
        styles["entry"],
    )

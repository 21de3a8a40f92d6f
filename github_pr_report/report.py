"""Markdown rendering of a pull request report."""

BREAK_LINE = "\n\n"
UNKNOWN_LABEL = "Unknown"


def format_item(user_login, item):
    return (f"- [{item.repository_name}] [#{item.issue_number}]({item.issue_url}) "
            f"{item.issue_title} ([@{user_login}])")


def format_items(items):
    return [format_item(item.user_login, item) for item in items]


def format_label(name):
    return f"## {name}"


def extract_definitions(items):
    """Collect markdown link references for every author and repository.

    One definition per login and per repository name; when the same key shows
    up with different URLs the first one seen wins. Users come first, then
    repositories, each block sorted by the full definition line.
    """
    users = {}
    repositories = {}

    for item in items:
        users.setdefault(item.user_login, f"[@{item.user_login}]: {item.user_url}")
        repositories.setdefault(item.repository_name,
                                f"[{item.repository_name}]: {item.repository_url}")

    return sorted(users.values()) + sorted(repositories.values())


def _section(name, items):
    return [format_label(name), ""] + format_items(items)


def render_grouped(groups, unknown, definitions, header=None):
    """Render the report with one section per non-empty label group.

    Args:
        groups (list): populated LabelGroup objects in configured order
        unknown (list): items no group claimed
        definitions (list): reference lines from extract_definitions
        header (list, optional): lines written above the sections

    Returns:
        str: the complete document
    """
    content = []

    for group in groups:
        if not group.items:
            continue
        if content:
            content.append("")
        content.extend(_section(group.name, group.items))

    if unknown:
        content.append("")
        content.extend(_section(UNKNOWN_LABEL, unknown))

    body = "\n".join(header or []) + "\n".join(content)
    return body + BREAK_LINE + "\n".join(definitions)


def render_flat(items, definitions):
    """Render bullets only, used when no configuration is available."""
    return "\n".join(format_items(items)) + BREAK_LINE + "\n".join(definitions)

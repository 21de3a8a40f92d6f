"""Normalized pull request records."""

from dataclasses import dataclass
from urllib.parse import urlparse


@dataclass(frozen=True)
class Item:
    issue_number: str
    issue_title: str
    issue_url: str
    repository_name: str
    repository_url: str
    user_login: str
    user_url: str


def repository_name_from_url(url):
    """Return ``owner/repo`` from a pull request URL.

    Args:
        url (str): e.g. ``https://github.com/atom/keyboard-layout/pull/63``

    Returns:
        str: the first two non-empty path segments joined by ``/``
    """
    parts = [part for part in urlparse(url).path.split('/') if part]
    if len(parts) < 2:
        raise ValueError(f"Not a repository URL: {url}")
    return f"{parts[0]}/{parts[1]}"


def repository_url_from_url(url):
    """Strip the trailing ``/pull/<n>`` segments from a pull request URL."""
    parts = url.split('/')
    return '/'.join(parts[:-2])


def item_from_issue(issue):
    """Build an Item from one raw search result."""
    url = issue['html_url']
    user = issue['user']
    return Item(
        issue_number=str(issue['number']),
        issue_title=issue['title'],
        issue_url=url,
        repository_name=repository_name_from_url(url),
        repository_url=repository_url_from_url(url),
        user_login=user['login'],
        user_url=user['html_url'],
    )

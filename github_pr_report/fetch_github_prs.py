#!/usr/bin/env python3
"""
GitHub Pull Request Report

Fetch the pull requests a set of users opened since a given date and write
them to a markdown changelog grouped by label.
"""

import argparse
import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional

import requests

from .config import read_config
from .errors import ConfigError, PageFetchError, RemoteFetchError
from .items import item_from_issue
from .labels import exclude_items, match_items_with_labels, sort_items
from .report import extract_definitions, render_flat, render_grouped

SEARCH_URL = 'https://api.github.com/search/issues'
PER_PAGE = 100
REQUEST_TIMEOUT = 60
DATE_SIGNS = ('>', '<', '=', '>=', '<=')
TOKEN_ENV = 'GITHUB_PERSONAL_TOKEN'


def make_headers(token=None):
    headers = {
        'Accept': 'application/vnd.github.v3+json',
        'User-Agent': 'GitHub-PR-Report'
    }
    if token:
        headers['Authorization'] = f'token {token}'
    return headers


def build_query(user, date_sign, date):
    """Search query for the pull requests ``user`` created relative to ``date``."""
    if date_sign not in DATE_SIGNS:
        raise ValueError(f"Unsupported date sign: {date_sign!r}")
    return f"is:pr author:{user} created:{date_sign}{date}"


@dataclass
class SearchPage:
    items: List[dict] = field(default_factory=list)
    next_url: Optional[str] = None


class GitHubSearch:
    """Issue search client. Pages are followed through the ``Link`` header."""

    def __init__(self, token=None, session=None):
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(make_headers(token))

    def _request(self, url, params, error_class):
        try:
            response = self.session.get(url, params=params, timeout=REQUEST_TIMEOUT)
        except requests.exceptions.RequestException as e:
            raise error_class(f"Error fetching pull requests: {e}") from e

        if response.status_code == 401:
            raise error_class("GitHub authentication failed, check the token",
                              status_code=401)
        if response.status_code == 403 and response.headers.get('X-RateLimit-Remaining') == '0':
            reset = response.headers.get('X-RateLimit-Reset', 'unknown')
            raise error_class(f"GitHub rate limit exceeded, resets at {reset}",
                              status_code=403)
        if response.status_code != 200:
            raise error_class(f"{response.status_code} - {response.text}",
                              status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise error_class(f"Invalid JSON in search response: {e}") from e
        if not isinstance(data, dict):
            raise error_class("Unexpected search response")

        next_link = response.links.get('next')
        return SearchPage(items=data.get('items', []),
                          next_url=next_link['url'] if next_link else None)

    def close(self):
        self.session.close()

    def search(self, query):
        """Fetch the first page of results for ``query``."""
        params = {'q': query, 'per_page': PER_PAGE}
        return self._request(SEARCH_URL, params, RemoteFetchError)

    def get_page(self, next_url):
        """Fetch the page behind a continuation URL, or None at the end."""
        if not next_url:
            return None
        return self._request(next_url, None, PageFetchError)

    def iter_pages(self, query):
        """Yield the raw items of every result page, in API order."""
        page = self.search(query)
        while page is not None:
            yield page.items
            page = self.get_page(page.next_url)


def _to_item(issue):
    try:
        return item_from_issue(issue)
    except (KeyError, TypeError, ValueError) as e:
        raise RemoteFetchError(f"Malformed search result: {e!r}") from e


def fetch_user_items(search, users, date_sign, date):
    """Fetch the pull requests of each user, one user after the other.

    Args:
        search: object exposing ``iter_pages(query)``
        users (list): GitHub logins, processed in order
        date_sign (str): one of DATE_SIGNS
        date (str): ISO date

    Returns:
        list: Item objects in the order the API returned them
    """
    items = []

    for user in users:
        print(f"Fetching pull requests by {user}...")
        count = 0
        for issues in search.iter_pages(build_query(user, date_sign, date)):
            items.extend(_to_item(issue) for issue in issues)
            count += len(issues)
        print(f"Fetched {count} pull requests")

    return items


def get_token(environ=None):
    environ = os.environ if environ is None else environ
    return environ.get(TOKEN_ENV, '')


def build_report(search, users, date_sign, date, config=None):
    """Fetch, filter and classify pull requests and render the document.

    Without a config the report degrades to a flat, ungrouped list.
    """
    if config is None:
        items = sort_items(fetch_user_items(search, users, date_sign, date))
        return render_flat(items, extract_definitions(items))

    items = fetch_user_items(search, users, date_sign, date)
    items = sort_items(exclude_items(items, config.exclude))
    definitions = extract_definitions(items)
    groups, unknown = match_items_with_labels(items, config.labels)
    return render_grouped(groups, unknown, definitions, header=config.header)


def write_report(content, date, output_dir='.'):
    path = os.path.join(output_dir, f"{date}.md")
    with open(path, 'w', encoding='utf-8') as fh:
        fh.write(content)
    return path


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='GitHub Pull Request Report')
    parser.add_argument('--users', nargs='+', default=[], help='GitHub usernames to report on')
    parser.add_argument('--date', required=True, help='ISO date, also used as the output file name')
    parser.add_argument('--date-sign', choices=DATE_SIGNS, default='>=',
                        help='How pull request creation dates compare to --date')
    parser.add_argument('--config-path', default='config.json', help='JSON configuration file')
    parser.add_argument('--token', help=f'GitHub personal access token (default: ${TOKEN_ENV})')
    parser.add_argument('--output-dir', default='.', help='Directory the report is written to')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    token = args.token or get_token()

    try:
        config = read_config(args.config_path)
    except ConfigError as e:
        print(f"Couldn't open configuration file '--config-path={args.config_path}'")
        print(e)
        config = None

    users = config.users if config is not None and config.users else args.users
    if not users:
        print("Error: no users given, pass --users or list them in the config", file=sys.stderr)
        return 1

    search = GitHubSearch(token)
    try:
        content = build_report(search, users, args.date_sign, args.date, config)
    except RemoteFetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        search.close()

    path = write_report(content, args.date, args.output_dir)
    print(f"Report written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3

import sys

from github_pr_report.fetch_github_prs import main

if __name__ == "__main__":
    sys.exit(main())
